"""Resolution of the workspace and project IDs a command works on."""

import logging
from typing import Callable, List, Optional

import click

from .arguments import ArgumentKey
from .clockify import ClockifyError, NamedResource
from .context import Context
from .errors import CommandExit, ExitCode

logger = logging.getLogger(__name__)


def find_by_name(resources: List[NamedResource], name: str) -> Optional[NamedResource]:
    """Return the first resource whose name equals ``name`` ignoring case."""
    wanted = name.casefold()
    return next((r for r in resources if r.name.casefold() == wanted), None)


def _resolve(
    label: str,
    explicit_id: Optional[str],
    name: Optional[str],
    lookup: Callable[[], List[NamedResource]],
    default_id: Optional[str],
    request_failure: ExitCode,
    not_found: ExitCode,
    not_specified: ExitCode,
) -> str:
    if explicit_id is not None:
        click.echo(f"Using provided {label} ID: {explicit_id}")
        return explicit_id

    if name is not None:
        click.echo(f"Querying available {label}s...")
        try:
            resources = lookup()
        except ClockifyError as e:
            logger.debug("Looking up %s %r failed: %s", label, name, e)
            raise CommandExit(request_failure, error=e) from e

        resource = find_by_name(resources, name)
        if resource is None:
            raise CommandExit(not_found, name=name)
        click.echo(f"Found {label} {name} with ID {resource.id}")
        return resource.id

    if default_id is not None:
        click.echo(f"Using {label} ID from config file: {default_id}")
        return default_id

    raise CommandExit(not_specified)


def resolve_workspace_id(context: Context) -> str:
    """
    Resolve the workspace ID for the current command.

    Priority: explicit ID override, name override looked up through the
    API, workspace ID from the config file.

    Raises
    ------
    CommandExit
        If the lookup fails, the name is unknown or nothing is specified
    """
    return _resolve(
        'workspace',
        explicit_id=context.override(ArgumentKey.WORKSPACE_ID),
        name=context.override(ArgumentKey.WORKSPACE_NAME),
        lookup=context.client.get_workspaces,
        default_id=context.config.workspace_id,
        request_failure=ExitCode.WORKSPACE_REQUEST_FAILURE,
        not_found=ExitCode.WORKSPACE_NOT_FOUND,
        not_specified=ExitCode.WORKSPACE_NOT_SPECIFIED,
    )


def resolve_project_id(context: Context, workspace_id: str) -> str:
    """
    Resolve the project ID inside an already resolved workspace.

    Same priority as :func:`resolve_workspace_id`, with project lookups
    scoped to ``workspace_id``.
    """
    return _resolve(
        'project',
        explicit_id=context.override(ArgumentKey.PROJECT_ID),
        name=context.override(ArgumentKey.PROJECT_NAME),
        lookup=lambda: context.client.get_projects(workspace_id),
        default_id=context.config.project_id,
        request_failure=ExitCode.PROJECT_REQUEST_FAILURE,
        not_found=ExitCode.PROJECT_NOT_FOUND,
        not_specified=ExitCode.PROJECT_NOT_SPECIFIED,
    )
