"""Selection of the command to run from the raw command line."""

import logging
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class Command(Enum):
    """Commands and the literal tokens that trigger them."""

    LIST_WORKSPACES = ('-w', '--workspaces')
    LIST_PROJECTS = ('-p', '--projects')
    REPORT = ('-r', '--report')
    HELP = ('-h', 'help', '-help', '--help')

    @property
    def triggers(self) -> FrozenSet[str]:
        return frozenset(self.value)

    @classmethod
    def for_trigger(cls, token: str) -> Optional['Command']:
        for command in cls:
            if token in command.triggers:
                return command
        return None


def resolve_command(tokens: Sequence[str]) -> Tuple[Command, List[str]]:
    """
    Find the command requested on the command line.

    The first token equal to a trigger selects the command. The handler
    gets the tokens starting at the trigger itself. Without any trigger
    the help command runs with the whole token list.

    Parameters
    ----------
    tokens : Sequence[str]
        Command line tokens without the program name

    Returns
    -------
    Tuple[Command, List[str]]
        The selected command and its argument sublist
    """
    for index, token in enumerate(tokens):
        command = Command.for_trigger(token)
        if command is not None:
            logger.debug("Selected command %s from token %r", command.name, token)
            return command, list(tokens[index:])

    logger.debug("No command token found, falling back to help")
    return Command.HELP, list(tokens)
