"""The report command: confirm and submit a time entry."""

import logging
from typing import Optional, Sequence, TextIO

import click

from .arguments import is_argument
from .clockify import ClockifyError, TimeEntry
from .context import Context
from .errors import CommandExit, ExitCode
from .resolver import resolve_project_id, resolve_workspace_id
from .timerange import ReportInput, parse_report_input

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid time or message. Type --help for usage description."


def format_summary(report: ReportInput) -> str:
    time_range = report.time_range
    return "\n".join([
        "Summary:",
        f"  - From: {time_range.start:%H:%M}",
        f"  - To: {time_range.end:%H:%M}",
        f"  - Date: {time_range.day:%d %b %Y}",
        f"  - Message: {report.message}",
    ])


def confirm(report: ReportInput, stdin: TextIO) -> bool:
    """Show the summary and read one line; only ``y`` confirms."""
    click.echo(format_summary(report))
    click.echo("Type 'y' to report.")
    answer = stdin.readline()
    return answer.rstrip('\r\n').lower() == 'y'


def run_report(context: Context, arguments: Sequence[str], stdin: Optional[TextIO] = None) -> None:
    """
    Run the report command.

    Parameters
    ----------
    context : Context
        Overrides, config and API client of this invocation
    arguments : Sequence[str]
        Command tokens starting with the report trigger
    stdin : Optional[TextIO]
        Stream the confirmation is read from, defaults to standard input

    Raises
    ------
    CommandExit
        If resolution fails, the report is not confirmed or the submission fails
    """
    # Overrides may appear anywhere after the trigger.
    positional = [token for token in arguments if not is_argument(token)]
    report = parse_report_input(positional)
    if report is None:
        click.echo(INVALID_INPUT_MESSAGE)
        return
    logger.debug("Parsed report %s: %r", report.time_range, report.message)

    workspace_id = resolve_workspace_id(context)
    project_id = resolve_project_id(context, workspace_id)

    if not confirm(report, stdin or click.get_text_stream('stdin')):
        raise CommandExit(ExitCode.UNCONFIRMED_REPORT)

    entry = TimeEntry(
        start=report.time_range.start,
        end=report.time_range.end,
        description=report.message,
        project_id=project_id,
    )
    click.echo("Sending report...")
    try:
        context.client.add_time_entry(workspace_id, entry)
    except ClockifyError as e:
        raise CommandExit(ExitCode.ADD_ENTRY_REQUEST_FAILED, error=e) from e

    click.echo("Time reported successfully! Finishing.")
