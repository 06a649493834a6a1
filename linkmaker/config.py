import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from jsonschema import Draft202012Validator

from linkmaker.constants import (
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULT_REPORT_WIDTH,
    MIN_REPORT_WIDTH,
    REPORT_WIDTH_ENV,
)
from linkmaker.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from linkmaker.utils import read_json_safe


logger = logging.getLogger(__name__)

_FLAG_SCHEMA: dict[str, Any] = {"type": "string", "minLength": 1}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "report_width": {"type": "integer", "minimum": MIN_REPORT_WIDTH},
        "tool": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "executable": _FLAG_SCHEMA,
                "base_arguments": {"type": "array", "items": {"type": "string"}},
                "directory_flag": _FLAG_SCHEMA,
                "junction_flag": _FLAG_SCHEMA,
                "hardlink_flag": _FLAG_SCHEMA,
            },
        },
    },
}


@dataclass(frozen=True)
class LinkTool:
    """External link-creation command and the flags selecting each link type."""

    executable: str = "cmd"
    base_arguments: tuple[str, ...] = ("/c", "mklink")
    directory_flag: str = "/D"
    junction_flag: str = "/J"
    hardlink_flag: str = "/H"

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "LinkTool":
        defaults = cls()
        return cls(
            executable=payload.get("executable", defaults.executable),
            base_arguments=tuple(
                payload.get("base_arguments", defaults.base_arguments)
            ),
            directory_flag=payload.get("directory_flag", defaults.directory_flag),
            junction_flag=payload.get("junction_flag", defaults.junction_flag),
            hardlink_flag=payload.get("hardlink_flag", defaults.hardlink_flag),
        )


@dataclass(frozen=True)
class LinkerConfig:
    report_width: int = DEFAULT_REPORT_WIDTH
    tool: LinkTool = field(default_factory=LinkTool)


def config_root() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def default_config_path() -> Path:
    return config_root() / CONFIG_FILENAME


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LinkerConfig:
    config_path = path or default_config_path()
    env = os.environ if environ is None else environ

    payload, error = read_json_safe(config_path)
    if error is not None:
        raise InvalidJsonFormatError(config_path, error)
    if payload is None:
        logger.debug("No config file at %s, using defaults", config_path)
        payload = {}
    validate_config(payload, config_path)

    report_width = payload.get("report_width", DEFAULT_REPORT_WIDTH)
    override = env.get(REPORT_WIDTH_ENV)
    if override:
        report_width = _parse_width(override, config_path)

    return LinkerConfig(
        report_width=report_width,
        tool=LinkTool.from_dict(payload.get("tool", {})),
    )


def validate_config(payload: Any, path: Path) -> None:
    validator = Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(
        validator.iter_errors(payload),
        key=lambda item: [str(part) for part in item.path],
    )
    if not errors:
        return
    first = errors[0]
    location = ".".join(str(part) for part in first.path) or "<root>"
    raise InvalidConfigSchemaError(path, f"{location}: {first.message}")


def _parse_width(value: str, path: Path) -> int:
    try:
        width = int(value)
    except ValueError:
        raise InvalidConfigSchemaError(
            path, f"{REPORT_WIDTH_ENV} must be an integer, got {value!r}"
        )
    if width < MIN_REPORT_WIDTH:
        raise InvalidConfigSchemaError(
            path, f"{REPORT_WIDTH_ENV} must be at least {MIN_REPORT_WIDTH}"
        )
    return width
