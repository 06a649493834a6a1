from pathlib import Path

from rich.console import Console
from rich.markup import escape

from linkmaker.models import LinkEntry, LinkStatus
from linkmaker.tui.enums import UIStyle
from linkmaker.tui.sections import UISection
from linkmaker.tui.tables import LinksTable, StatusTable
from linkmaker.utils import compact_home_path


class LinkConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_status(self, status: LinkStatus) -> None:
        self.console.print(
            UISection.outcome(
                "link", StatusTable.status_block(status), succeeded=status.succeeded
            )
        )

    def render_declined(self, name: str) -> None:
        self.console.print(
            UISection.note(
                "link", f"Skipped, not confirmed: {escape(name)}", style=UIStyle.YELLOW.value
            )
        )

    def render_error(self, error: Exception) -> None:
        self.console.print(
            UISection.note(
                type(error).__name__, escape(str(error)), style=UIStyle.RED.value
            )
        )

    def render_links(self, directory: Path, entries: list[LinkEntry]) -> None:
        title = f"links in {compact_home_path(directory)}"
        if not entries:
            self.console.print(
                UISection.note(title, "No links found.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            UISection.wrap(
                title,
                LinksTable.links_table(entries),
                style=UIStyle.BLUE.value,
                subtitle=f"{len(entries)} found",
            )
        )
