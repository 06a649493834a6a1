from typing import Final


APP_NAME: Final[str] = "linkmaker"
CONFIG_FILENAME: Final[str] = "config.json"

DEFAULT_REPORT_WIDTH: Final[int] = 140
MIN_REPORT_WIDTH: Final[int] = 40
REPORT_WIDTH_ENV: Final[str] = "LINKMAKER_REPORT_WIDTH"

STATUS_PENDING: Final[str] = "Command not yet run"
STATUS_SUCCEEDED: Final[str] = "Command completed successfully"
STATUS_FAILED: Final[str] = "Command FAILED!"

LINK_ARROW: Final[str] = "==>"

FILE_ATTRIBUTE_REPARSE_POINT: Final[int] = 0x400
