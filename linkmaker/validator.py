import logging
import os
import stat
from typing import Any, Optional

from linkmaker.error_report import ErrorReporter
from linkmaker.errors import (
    InvalidLinkTypeError,
    PathResolutionError,
    UnsupportedLinkTypeError,
)
from linkmaker.models import LinkRequest, LinkType, ResolvedDestination


logger = logging.getLogger(__name__)

JUNCTION_NEEDS_DIRECTORY = "Junction requires a directory destination"
HARDLINK_NEEDS_FILE = "Hardlink requires a non-directory destination"


def normalize_name(name: str, cwd: Optional[str] = None) -> str:
    """Anchor a bare file name to the working directory.

    Names that already carry a directory component are returned unchanged.
    """
    if os.path.dirname(name):
        return name
    return os.path.join(cwd or os.getcwd(), name)


def resolve_parent(name: str, cwd: Optional[str] = None) -> str:
    parent = os.path.dirname(name)
    try:
        os.stat(_absolute(parent, cwd))
    except OSError as exc:
        raise PathResolutionError(parent, "Cannot resolve parent directory") from exc
    return parent


def resolve_destination(
    destination: str, cwd: Optional[str] = None
) -> ResolvedDestination:
    full_path = _absolute(destination, cwd)
    try:
        info = os.stat(full_path)
    except OSError as exc:
        raise PathResolutionError(destination, "Cannot resolve destination") from exc
    return ResolvedDestination(
        full_path=full_path, is_directory=stat.S_ISDIR(info.st_mode)
    )


def check_compatibility(link_type: Any, destination: ResolvedDestination) -> None:
    if link_type is LinkType.SYMBOLIC_LINK:
        return
    if link_type is LinkType.JUNCTION:
        if not destination.is_directory:
            raise InvalidLinkTypeError(JUNCTION_NEEDS_DIRECTORY)
        return
    if link_type is LinkType.HARDLINK:
        if destination.is_directory:
            raise InvalidLinkTypeError(HARDLINK_NEEDS_FILE)
        return
    raise UnsupportedLinkTypeError(link_type)


class LinkRequestValidator:
    def __init__(self, reporter: Optional[ErrorReporter] = None) -> None:
        self.reporter = reporter or ErrorReporter()

    def validate(
        self,
        name: str,
        destination: str,
        link_type: Any,
        cwd: Optional[str] = None,
    ) -> tuple[LinkRequest, ResolvedDestination]:
        with self.reporter.reporting():
            normalized = normalize_name(name, cwd)
            resolve_parent(normalized, cwd)
            resolved = resolve_destination(destination, cwd)
            check_compatibility(link_type, resolved)

        logger.debug(
            "Validated %s request %s -> %s (directory=%s)",
            link_type.value,
            normalized,
            resolved.full_path,
            resolved.is_directory,
        )
        request = LinkRequest(
            name=normalized, destination=destination, link_type=link_type
        )
        return request, resolved


def _absolute(path: str, cwd: Optional[str]) -> str:
    if os.path.isabs(path):
        return os.path.normpath(path)
    return os.path.normpath(os.path.join(cwd or os.getcwd(), path))
