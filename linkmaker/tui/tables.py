from rich.table import Column, Table
from rich.text import Text

from linkmaker.models import LinkEntry, LinkStatus
from linkmaker.tui.enums import UIStyle
from linkmaker.utils import compact_home_path


class StatusTable:
    @staticmethod
    def status_block(status: LinkStatus) -> Table:
        style = UIStyle.GREEN.value if status.succeeded else UIStyle.RED.value
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        table.add_row("Status", Text(status.status, style=style))
        table.add_row("Exit code", "" if status.exit_code is None else str(status.exit_code))
        table.add_row("Link", Text(status.link_created or ""))
        table.add_row("Command", Text(status.command))
        if status.std_out and status.std_out.strip():
            table.add_row("Stdout", Text(status.std_out.strip()))
        if status.std_err and status.std_err.strip():
            table.add_row("Stderr", Text(status.std_err.strip(), style=UIStyle.YELLOW.value))
        return table


class LinksTable:
    @staticmethod
    def links_table(entries: list[LinkEntry]) -> Table:
        table = Table(
            Column(header="Name", width=28, overflow="ellipsis"),
            Column(header="Kind", width=10),
            Column(header="Target", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for entry in entries:
            kind = "directory" if entry.is_directory else "file"
            style = UIStyle.MAGENTA.value if entry.is_directory else UIStyle.CYAN.value
            table.add_row(
                Text(entry.name),
                f"[{style}]{kind}[/{style}]",
                Text(compact_home_path(entry.target) if entry.target else ""),
            )
        return table
