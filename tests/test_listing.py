import os
from pathlib import Path

import pytest

from linkmaker import listing
from linkmaker.errors import PathResolutionError
from linkmaker.listing import list_links


@pytest.fixture
def link_dir(tmp_path: Path, data_dir: Path) -> Path:
    root = tmp_path / "links"
    root.mkdir()
    (root / "plain.txt").write_text("plain", encoding="utf-8")
    (root / "file-link").symlink_to(data_dir / "file.txt")
    return root


def test_lists_only_symbolic_links(link_dir: Path, data_dir: Path) -> None:
    entries = list_links(link_dir)

    assert [entry.name for entry in entries] == ["file-link"]
    assert entries[0].path == link_dir / "file-link"
    assert entries[0].is_directory is False
    assert entries[0].target == str(data_dir / "file.txt")


def test_directory_links_are_listed(link_dir: Path, data_dir: Path) -> None:
    (link_dir / "dir-link").symlink_to(data_dir, target_is_directory=True)
    (link_dir / "real-dir").mkdir()

    entries = list_links(link_dir)

    assert [entry.name for entry in entries] == ["dir-link", "file-link"]
    assert entries[0].is_directory is True


def test_hardlinks_are_not_listed(link_dir: Path, data_dir: Path) -> None:
    os.link(data_dir / "file.txt", link_dir / "hard.txt")

    names = [entry.name for entry in list_links(link_dir)]

    assert "hard.txt" not in names


def test_broken_links_are_listed(link_dir: Path, tmp_path: Path) -> None:
    (link_dir / "dangling").symlink_to(tmp_path / "gone")

    names = [entry.name for entry in list_links(link_dir)]

    assert names == ["dangling", "file-link"]


def test_name_filter(link_dir: Path, data_dir: Path) -> None:
    (link_dir / "other").symlink_to(data_dir)

    assert [entry.name for entry in list_links(link_dir, "file-*")] == ["file-link"]
    assert list_links(link_dir, "*.txt") == []


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(PathResolutionError) as excinfo:
        list_links(tmp_path / "absent")

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_as_dict(link_dir: Path, data_dir: Path) -> None:
    [entry] = list_links(link_dir)

    assert entry.as_dict() == {
        "name": "file-link",
        "path": str(link_dir / "file-link"),
        "kind": "file",
        "target": str(data_dir / "file.txt"),
    }


def test_entry_removed_during_scan_is_skipped(
    link_dir: Path, data_dir: Path, monkeypatch
) -> None:
    (link_dir / "vanishing").symlink_to(data_dir)
    original = listing.is_reparse_point

    def flaky(entry) -> bool:
        if entry.name == "vanishing":
            raise FileNotFoundError(entry.path)
        return original(entry)

    monkeypatch.setattr(listing, "is_reparse_point", flaky)

    assert [entry.name for entry in list_links(link_dir)] == ["file-link"]
