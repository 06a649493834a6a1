from typing import Optional

from linkmaker.constants import STATUS_FAILED, STATUS_SUCCEEDED
from linkmaker.error_report import ErrorReporter
from linkmaker.errors import CommandFailedError
from linkmaker.models import (
    LinkRequest,
    LinkStatus,
    ProcessResult,
    ResolvedDestination,
    format_link_created,
)


def assemble_status(
    status: LinkStatus,
    result: ProcessResult,
    request: LinkRequest,
    destination: ResolvedDestination,
    reporter: Optional[ErrorReporter] = None,
) -> LinkStatus:
    if result.exit_code == 0:
        status.complete(
            STATUS_SUCCEEDED,
            result,
            link_created=format_link_created(request.name, destination.full_path),
        )
        return status

    status.complete(STATUS_FAILED, result)
    with (reporter or ErrorReporter()).reporting():
        raise CommandFailedError(status.render(), status=status)
