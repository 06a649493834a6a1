import fnmatch
import os
from pathlib import Path
from typing import Optional

from linkmaker.constants import FILE_ATTRIBUTE_REPARSE_POINT
from linkmaker.errors import PathResolutionError
from linkmaker.models import LinkEntry


def is_reparse_point(entry: os.DirEntry) -> bool:
    """Symbolic links and junctions carry the reparse-point attribute; hardlinks never do."""
    info = entry.stat(follow_symlinks=False)
    attributes = getattr(info, "st_file_attributes", None)
    if attributes is not None:
        return bool(attributes & FILE_ATTRIBUTE_REPARSE_POINT)
    return entry.is_symlink()


def read_target(path: str) -> Optional[str]:
    try:
        return os.readlink(path)
    except OSError:
        return None


def list_links(
    directory: str | Path, name_filter: Optional[str] = None
) -> list[LinkEntry]:
    root = Path(directory)
    try:
        scanner = os.scandir(root)
    except OSError as exc:
        raise PathResolutionError(str(root), "Cannot list directory") from exc

    links: list[LinkEntry] = []
    with scanner:
        for entry in scanner:
            if name_filter and not fnmatch.fnmatch(entry.name, name_filter):
                continue
            try:
                if not is_reparse_point(entry):
                    continue
            except OSError:
                # removed while scanning
                continue
            links.append(
                LinkEntry(
                    name=entry.name,
                    path=Path(entry.path),
                    is_directory=entry.is_dir(),
                    target=read_target(entry.path),
                )
            )
    return sorted(links, key=lambda item: item.name)
