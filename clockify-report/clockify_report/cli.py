"""Command line interface for reporting time to Clockify."""

import logging
import sys
from typing import Sequence

import click

from .arguments import ArgumentKey, parse_arguments
from .clockify import ClockifyClient, ClockifyError
from .commands import Command, resolve_command
from .config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from .context import Context
from .errors import CommandExit, ExitCode
from .report import run_report
from .resolver import resolve_workspace_id

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

PROG_NAME = 'clockify-report'


def configure_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")


def _aliases(key: ArgumentKey) -> str:
    return ', '.join(key.value)


def help_text() -> str:
    """Build the usage description printed by the help command."""
    return f"""Usage:
  {PROG_NAME} <command> [parameters]

IMPORTANT: Provide your Clockify API key in a "config.json" file!
See example-config.json for an example.

Available commands:
  * Help: {', '.join(Command.HELP.value)}
  * Query available workspaces: {', '.join(Command.LIST_WORKSPACES.value)}
  * Query available projects: {', '.join(Command.LIST_PROJECTS.value)}
  * Report time: {', '.join(Command.REPORT.value)}

    Description:
      Report time using `-r` or `--report` command.

    Example:
      {PROG_NAME} -r 9-18 "Remote work"
          Report "Remote work" today from 9 AM to 6 PM. Workspace and project must be already specified in config.json file.
      {PROG_NAME} -r 9:30-18:40 03.06 Meetings
          Report "Meetings" from 9:30 AM to 6:40 PM on 03.06 this year. Workspace and project must be already specified in config.json file.
      {PROG_NAME} --workspace=myWorkspace --project=myProject -r 10-18:20 "Busy as hell"
          Report "Busy as hell" today from 10:00 AM to 6:20 PM in "myWorkspace" workspace & in project named "myProject"

    Parameters:
      <time> (required)
          Must be provided immediately after the command. Minutes are optional. The time must be in 24h format
      [date] (optional) (default: today)
          Specify date of the report (03.06, 03.06.2024 or 03.06.24)
      <message> (required)
          Must be provided as the last parameter. Does not need quotes if it does not contain spaces.

Configuration parameters:
    [{_aliases(ArgumentKey.WORKSPACE_ID)}]
        Specify workspace ID in key=value format.
    [{_aliases(ArgumentKey.WORKSPACE_NAME)}]
        Specify workspace name in key=value format.
    [{_aliases(ArgumentKey.PROJECT_ID)}]
        Specify project ID in key=value format.
    [{_aliases(ArgumentKey.PROJECT_NAME)}]
        Specify project name in key=value format.

Options:
    --config PATH
        Config file to use (default: {DEFAULT_CONFIG_PATH}, env: CLOCKIFY_REPORT_CONFIG).
    --verbose
        Enable verbose logging."""


def build_context(config_path: str, tokens: Sequence[str]) -> Context:
    """Load the config and create the API client for this invocation."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.debug("Config could not be loaded: %s", e)
        raise CommandExit(ExitCode.API_KEY_MISSING) from e

    return Context(
        config=config,
        client=ClockifyClient(config.api_key),
        arguments=parse_arguments(tokens),
    )


def list_workspaces(context: Context) -> None:
    click.echo("Querying available workspaces...")
    try:
        workspaces = context.client.get_workspaces()
    except ClockifyError as e:
        raise CommandExit(ExitCode.WORKSPACE_REQUEST_FAILURE, error=e) from e

    click.echo("Available workspaces:")
    for workspace in workspaces:
        click.echo(f"  {workspace}")


def list_projects(context: Context) -> None:
    workspace_id = resolve_workspace_id(context)
    click.echo("Querying available projects...")
    try:
        projects = context.client.get_projects(workspace_id)
    except ClockifyError as e:
        raise CommandExit(ExitCode.PROJECT_REQUEST_FAILURE, error=e) from e

    click.echo("Available projects:")
    for project in projects:
        click.echo(f"  {project}")


def run_command(command: Command, context: Context, arguments: Sequence[str]) -> None:
    if command is Command.LIST_WORKSPACES:
        list_workspaces(context)
    elif command is Command.LIST_PROJECTS:
        list_projects(context)
    elif command is Command.REPORT:
        run_report(context, arguments)


@click.command(context_settings={
    'ignore_unknown_options': True,
    'help_option_names': [],
})
@click.option(
    '--config', 'config_path',
    default=str(DEFAULT_CONFIG_PATH),
    envvar='CLOCKIFY_REPORT_CONFIG',
    type=click.Path(dir_okay=False),
    help='Path to the config.json file'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose logging'
)
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
def cli(config_path: str, verbose: bool, tokens: Sequence[str]) -> None:
    """List Clockify workspaces and projects and report time entries."""
    configure_logging(verbose)
    logger.debug("Command line tokens: %s", list(tokens))

    command, arguments = resolve_command(tokens)
    if command is Command.HELP:
        click.echo(help_text())
        return

    try:
        context = build_context(config_path, tokens)
        run_command(command, context, arguments)
    except CommandExit as e:
        click.echo(e.message, err=e.is_error)
        sys.exit(e.code)


if __name__ == '__main__':
    cli()
