"""Exit outcomes of the command line client."""

from enum import Enum


class ExitCode(Enum):
    """Process exit outcomes with their code and message template."""

    UNCONFIRMED_REPORT = (0, "Did not confirm, discarding.")
    API_KEY_MISSING = (
        1,
        "No apiKey found in config file. Make sure your Clockify API key is "
        "specified in a config.json file (create one first if it does not "
        "exist yet). See example-config.json to learn about the JSON "
        "structure and the available config fields.",
    )
    WORKSPACE_REQUEST_FAILURE = (2, "An error occurred: {error}. Aborting.")
    WORKSPACE_NOT_FOUND = (
        3,
        "Workspace named '{name}' not found. Use --workspaces to see "
        "available workspaces. Aborting.",
    )
    WORKSPACE_NOT_SPECIFIED = (4, "Workspace not specified. Aborting.")
    PROJECT_REQUEST_FAILURE = (5, "An error occurred: {error}. Aborting.")
    PROJECT_NOT_FOUND = (
        6,
        "Project named '{name}' not found. Use --projects to see available "
        "projects (if the workspace is not specified explicitly, the default "
        "one is used). Aborting.",
    )
    PROJECT_NOT_SPECIFIED = (7, "Project not specified. Aborting.")
    ADD_ENTRY_REQUEST_FAILED = (8, "An error occurred: {error}. Aborting.")

    def __init__(self, code: int, template: str):
        self.code = code
        self.template = template

    def format(self, **details: object) -> str:
        return self.template.format(**details)


class CommandExit(Exception):
    """Raised to stop the current command and exit the process.

    The CLI catches it once, prints ``message`` and exits with ``code``.
    """

    def __init__(self, exit_code: ExitCode, **details: object):
        self.exit_code = exit_code
        self.message = exit_code.format(**details)
        super().__init__(self.message)

    @property
    def code(self) -> int:
        return self.exit_code.code

    @property
    def is_error(self) -> bool:
        return self.exit_code.code != 0
