from linkmaker.config import LinkTool
from linkmaker.errors import UnsupportedLinkTypeError
from linkmaker.models import (
    CommandInvocation,
    LinkRequest,
    LinkType,
    ResolvedDestination,
)


def link_type_flags(
    request: LinkRequest, destination: ResolvedDestination, tool: LinkTool
) -> list[str]:
    link_type = request.link_type
    if link_type is LinkType.SYMBOLIC_LINK:
        return [tool.directory_flag] if destination.is_directory else []
    if link_type is LinkType.JUNCTION:
        return [tool.junction_flag]
    if link_type is LinkType.HARDLINK:
        return [tool.hardlink_flag]
    raise UnsupportedLinkTypeError(link_type)


def build_command(
    request: LinkRequest,
    destination: ResolvedDestination,
    tool: LinkTool | None = None,
    cwd: str | None = None,
) -> CommandInvocation:
    tool = tool or LinkTool()
    arguments = [
        *tool.base_arguments,
        *link_type_flags(request, destination, tool),
        request.name,
        destination.full_path,
    ]
    return CommandInvocation(
        executable=tool.executable, arguments=tuple(arguments), cwd=cwd
    )
