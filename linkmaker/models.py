from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from linkmaker.constants import LINK_ARROW, STATUS_PENDING
from linkmaker.utils import quote_argument


PATH_ARGUMENT_COUNT = 2


class LinkType(str, Enum):
    SYMBOLIC_LINK = "symbolic"
    JUNCTION = "junction"
    HARDLINK = "hardlink"

    @property
    def label(self) -> str:
        return LINK_TYPE_LABELS[self]


LINK_TYPE_LABELS: dict[LinkType, str] = {
    LinkType.SYMBOLIC_LINK: "SymbolicLink",
    LinkType.JUNCTION: "Junction",
    LinkType.HARDLINK: "HardLink",
}


@dataclass(frozen=True)
class LinkRequest:
    name: str
    destination: str
    link_type: LinkType


@dataclass(frozen=True)
class ResolvedDestination:
    full_path: str
    is_directory: bool


@dataclass(frozen=True)
class CommandInvocation:
    executable: str
    arguments: tuple[str, ...] = ()
    # directory the link name was validated against; None means the current one
    cwd: Optional[str] = None

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]

    @property
    def command_text(self) -> str:
        """Full invocation text; the trailing link and destination paths are always quoted."""
        split = len(self.arguments) - PATH_ARGUMENT_COUNT
        parts = [_quote_if_needed(self.executable)]
        for index, argument in enumerate(self.arguments):
            if index >= split:
                parts.append(quote_argument(argument))
            else:
                parts.append(_quote_if_needed(argument))
        return " ".join(parts)


@dataclass(frozen=True)
class ProcessResult:
    stdout: str
    stderr: str
    exit_code: int


@dataclass
class LinkStatus:
    status: str
    command: str
    exit_code: Optional[int] = None
    link_created: Optional[str] = None
    std_out: Optional[str] = None
    std_err: Optional[str] = None

    @classmethod
    def pending(cls, command: str) -> "LinkStatus":
        return cls(status=STATUS_PENDING, command=command)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def complete(
        self,
        status: str,
        result: ProcessResult,
        link_created: Optional[str] = None,
    ) -> None:
        if self.exit_code is not None:
            raise RuntimeError("Link status has already been completed")
        self.status = status
        self.exit_code = result.exit_code
        self.std_out = result.stdout
        self.std_err = result.stderr
        self.link_created = link_created

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    def render(self) -> str:
        rows = [
            ("Status", self.status),
            ("ExitCode", self.exit_code),
            ("LinkCreated", self.link_created),
            ("Command", self.command),
            ("StdOut", self.std_out),
            ("StdErr", self.std_err),
        ]
        key_width = max(len(key) for key, _ in rows)
        lines = []
        for key, value in rows:
            text = "" if value is None else str(value).strip()
            lines.append(f"{key.ljust(key_width)} : {text}".rstrip())
        return "\n".join(lines)


@dataclass(frozen=True)
class LinkEntry:
    name: str
    path: Path
    is_directory: bool
    target: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": str(self.path),
            "kind": "directory" if self.is_directory else "file",
            "target": self.target or "",
        }


def format_link_created(name: str, destination: str) -> str:
    return f"{name} {LINK_ARROW} {destination}"


def _quote_if_needed(value: str) -> str:
    if not value or any(char.isspace() for char in value):
        return quote_argument(value)
    return value
