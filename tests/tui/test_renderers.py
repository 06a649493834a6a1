from pathlib import Path

from rich.console import Console

from linkmaker.constants import STATUS_FAILED, STATUS_SUCCEEDED
from linkmaker.errors import InvalidLinkTypeError
from linkmaker.models import LinkEntry, LinkStatus, ProcessResult
from linkmaker.tui import LinkConsoleUI


def _ui() -> tuple[LinkConsoleUI, Console]:
    console = Console(record=True, width=120)
    return LinkConsoleUI(console), console


def test_render_success_status() -> None:
    ui, console = _ui()
    status = LinkStatus.pending('cmd /c mklink "a" "b"')
    status.complete(
        STATUS_SUCCEEDED, ProcessResult("created\n", "", 0), link_created="a ==> b"
    )

    ui.render_status(status)
    text = console.export_text()

    assert STATUS_SUCCEEDED in text
    assert "a ==> b" in text
    assert "ok" in text


def test_render_failed_status_shows_stderr() -> None:
    ui, console = _ui()
    status = LinkStatus.pending("cmd /c mklink [x] y")
    status.complete(STATUS_FAILED, ProcessResult("", "Access is denied.", 1))

    ui.render_status(status)
    text = console.export_text()

    assert STATUS_FAILED in text
    assert "Access is denied." in text
    assert "[x]" in text


def test_render_error() -> None:
    ui, console = _ui()

    ui.render_error(InvalidLinkTypeError("Junction requires a directory destination"))
    text = console.export_text()

    assert "InvalidLinkTypeError" in text
    assert "Junction requires a directory destination" in text


def test_render_links_table(tmp_path: Path) -> None:
    ui, console = _ui()
    entries = [
        LinkEntry(name="docs", path=tmp_path / "docs", is_directory=True, target="/srv/docs"),
        LinkEntry(name="notes.txt", path=tmp_path / "notes.txt", is_directory=False),
    ]

    ui.render_links(tmp_path, entries)
    text = console.export_text()

    assert "docs" in text
    assert "directory" in text
    assert "notes.txt" in text
    assert "2 found" in text
