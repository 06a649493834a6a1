from linkmaker.errors import (
    CommandFailedError,
    InvalidLinkTypeError,
    LinkError,
    PathResolutionError,
    ProcessLaunchError,
    UnsupportedLinkTypeError,
)
from linkmaker.listing import list_links
from linkmaker.models import LinkStatus, LinkType
from linkmaker.service import LinkService, create_link

__all__ = [
    "CommandFailedError",
    "InvalidLinkTypeError",
    "LinkError",
    "LinkService",
    "LinkStatus",
    "LinkType",
    "PathResolutionError",
    "ProcessLaunchError",
    "UnsupportedLinkTypeError",
    "create_link",
    "list_links",
]
