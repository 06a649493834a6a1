import logging
from typing import Any, Callable, Optional

import click

from linkmaker.command_builder import build_command
from linkmaker.config import LinkerConfig
from linkmaker.error_report import ErrorReporter
from linkmaker.models import LinkStatus, format_link_created
from linkmaker.process import ProcessRunner, SubprocessRunner
from linkmaker.status import assemble_status
from linkmaker.validator import LinkRequestValidator


logger = logging.getLogger(__name__)

Confirmer = Callable[[str], bool]


def prompt_confirm(message: str) -> bool:
    return click.confirm(message, default=False)


class LinkService:
    def __init__(
        self,
        config: Optional[LinkerConfig] = None,
        runner: Optional[ProcessRunner] = None,
        confirmer: Optional[Confirmer] = None,
        reporter: Optional[ErrorReporter] = None,
    ) -> None:
        self.config = config or LinkerConfig()
        self.reporter = reporter or ErrorReporter(width=self.config.report_width)
        self.validator = LinkRequestValidator(self.reporter)
        self.runner = runner or SubprocessRunner(self.reporter)
        self.confirmer = confirmer or prompt_confirm

    def create_link(
        self,
        name: str,
        destination: str,
        link_type: Any,
        confirm: bool = False,
        cwd: Optional[str] = None,
    ) -> Optional[LinkStatus]:
        request, resolved = self.validator.validate(name, destination, link_type, cwd)
        invocation = build_command(request, resolved, self.config.tool, cwd=cwd)
        status = LinkStatus.pending(invocation.command_text)

        if confirm:
            target = format_link_created(request.name, resolved.full_path)
            question = f"Create {request.link_type.label} {target}?"
            if not self.confirmer(question):
                logger.info("Declined: %s", invocation.command_text)
                return None

        result = self.runner.run(invocation)
        return assemble_status(status, result, request, resolved, self.reporter)


def create_link(
    name: str,
    destination: str,
    link_type: Any,
    confirm: bool = False,
    config: Optional[LinkerConfig] = None,
) -> Optional[LinkStatus]:
    return LinkService(config=config).create_link(
        name, destination, link_type, confirm=confirm
    )
