from pathlib import Path
from typing import Any, Optional


class LinkerError(Exception):
    """Base user-facing application error."""


class LinkError(LinkerError):
    """Base for every failure of the link-creation operation."""


class PathResolutionError(LinkError):
    def __init__(self, target: str, message: str = "Cannot resolve path") -> None:
        self.target = target
        self.message = message
        super().__init__(f"{message}: {target}")


class InvalidLinkTypeError(LinkError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnsupportedLinkTypeError(LinkError):
    """Raised for a link type value outside the supported set.

    This is a contract violation by the caller, not a user input problem.
    """

    def __init__(self, link_type: Any) -> None:
        self.link_type = link_type
        super().__init__(f"Unsupported link type: {link_type!r}")


class ProcessLaunchError(LinkError):
    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(f"Could not start link tool: {executable}")


class CommandFailedError(LinkError):
    def __init__(self, text: str, status: Optional[Any] = None) -> None:
        self.text = text
        self.status = status
        super().__init__(text)


class ConfigFileError(LinkerError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidJsonFormatError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
