"""Flatten an exception and its chain of underlying causes into a text report.

The report is purely diagnostic. Rendering never raises: a field that cannot
be rendered is replaced by a ``repr`` fallback or left out.
"""

import logging
import textwrap
import traceback
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from linkmaker.constants import DEFAULT_REPORT_WIDTH


logger = logging.getLogger(__name__)

CAUSE_FILL = "-"
RESULT_CODE_FIELDS: tuple[str, ...] = ("hresult", "winerror", "errno")
OS_ERROR_FIELDS: tuple[str, ...] = ("strerror", "filename", "filename2")

Rows = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class ErrorView:
    """Read-only presentation of an error; the error itself is never touched."""

    type_name: str
    message: str
    properties: Rows = ()
    result_code_hex: Optional[str] = None
    invocation: Rows = ()

    @classmethod
    def from_error(cls, error: Any) -> "ErrorView":
        message = _stringify(error)
        return cls(
            type_name=type(error).__name__,
            message=message,
            properties=_property_rows(error, message),
            result_code_hex=_result_code_hex(error),
            invocation=_invocation_rows(error),
        )

    def rows(self) -> Rows:
        rows: list[tuple[str, str]] = [
            ("Type", self.type_name),
            ("Message", self.message),
        ]
        rows.extend(self.properties)
        if self.result_code_hex is not None:
            rows.append(("ResultCode", self.result_code_hex))
        return tuple(rows)


class ErrorReporter:
    def __init__(
        self,
        width: int = DEFAULT_REPORT_WIDTH,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.width = width
        self.logger = log or logger

    def render(self, error: BaseException) -> str:
        return render_error_report(error, width=self.width)

    def report(self, error: BaseException) -> None:
        self.logger.warning("%s", self.render(error))

    @contextmanager
    def reporting(self) -> Iterator[None]:
        """Log a report for any error raised in the block, then re-raise it unchanged."""
        try:
            yield
        except Exception as exc:
            self.report(exc)
            raise


def render_error_report(error: Any, width: int = DEFAULT_REPORT_WIDTH) -> str:
    causes = list(iter_causes(error))
    width = _effective_width(width, len(causes) - 1)
    view = _safe_view(error)

    lines = _format_rows(view.rows(), width)
    lines.extend(_format_rows(view.invocation, width))
    for index, cause in enumerate(causes):
        lines.append(cause_separator(index, width))
        lines.extend(_format_rows(_safe_view(cause).rows(), width))
    return "\n".join(lines)


def cause_separator(index: int, width: int = DEFAULT_REPORT_WIDTH) -> str:
    return _cause_label(index).ljust(_effective_width(width, index), CAUSE_FILL)


def _cause_label(index: int) -> str:
    return f"---[cause #{index}]"


def iter_causes(error: Any) -> Iterator[BaseException]:
    seen = {id(error)}
    current = _next_cause(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_cause(current)


def _next_cause(error: Any) -> Optional[BaseException]:
    cause = getattr(error, "__cause__", None)
    if cause is not None:
        return cause
    if getattr(error, "__suppress_context__", False):
        return None
    return getattr(error, "__context__", None)


def _safe_view(error: Any) -> ErrorView:
    try:
        return ErrorView.from_error(error)
    except Exception:
        return ErrorView(type_name=type(error).__name__, message=object.__repr__(error))


def _property_rows(error: Any, message: str) -> Rows:
    rows: list[tuple[str, str]] = []
    try:
        attributes = dict(vars(error))
    except TypeError:
        attributes = {}
    if isinstance(error, OSError):
        for name in OS_ERROR_FIELDS:
            value = getattr(error, name, None)
            if value is not None:
                attributes.setdefault(name, value)

    for name, value in attributes.items():
        if name.startswith("_") or name in RESULT_CODE_FIELDS:
            continue
        text = _stringify(value)
        if text == message:
            continue
        rows.append((name, text))
    return tuple(rows)


def _result_code_hex(error: Any) -> Optional[str]:
    for name in RESULT_CODE_FIELDS:
        try:
            code = getattr(error, name, None)
        except Exception:
            continue
        if isinstance(code, int) and not isinstance(code, bool):
            return f"0x{code & 0xFFFFFFFF:08X}"
    return None


def _invocation_rows(error: Any) -> Rows:
    tb = getattr(error, "__traceback__", None)
    if tb is None:
        return ()
    frames = traceback.extract_tb(tb)
    if not frames:
        return ()
    frame = frames[-1]
    return (
        ("ScriptName", frame.filename),
        ("LineNumber", str(frame.lineno)),
        ("Function", frame.name),
        ("Line", frame.line or ""),
        ("PositionMessage", f"At {frame.filename}:{frame.lineno} in {frame.name}"),
    )


def _format_rows(rows: Rows, width: int) -> list[str]:
    if not rows:
        return []
    key_width = max(len(key) for key, _ in rows)
    indent = " " * (key_width + 3)
    if len(indent) >= width // 2:
        indent = ""

    lines: list[str] = []
    for key, value in rows:
        value_lines = value.splitlines() or [""]
        first = f"{key.ljust(key_width)} : {value_lines[0]}"
        lines.extend(_wrap(first, width, indent))
        for extra in value_lines[1:]:
            lines.extend(_wrap(f"{indent}{extra}", width, indent))
    return lines


def _wrap(text: str, width: int, indent: str) -> list[str]:
    text = text.rstrip()
    if len(text) <= width:
        return [text]
    wrapped = textwrap.wrap(
        text,
        width=width,
        subsequent_indent=indent,
        break_long_words=True,
        break_on_hyphens=False,
    )
    return wrapped or [text[:width]]


def _stringify(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _effective_width(width: Any, last_cause: int = -1) -> int:
    """Honour the requested width, widening only when a cause label cannot fit."""
    try:
        width = int(width)
    except (TypeError, ValueError):
        return DEFAULT_REPORT_WIDTH
    floor = len(_cause_label(last_cause)) if last_cause >= 0 else 1
    return max(width, floor)
