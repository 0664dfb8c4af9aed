"""Typed ``flag=value`` overrides taken from the raw command line."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional


class ArgumentKey(Enum):
    """Logical override keys and the flag aliases that select them."""

    WORKSPACE_NAME = ('-wname', '--workspace', '--workspace-name')
    WORKSPACE_ID = ('-wid', '--workspaceid', '--workspace-id')
    PROJECT_NAME = ('-pname', '--project', '--project-name')
    PROJECT_ID = ('-pid', '--projectid', '--project-id')

    @property
    def aliases(self) -> FrozenSet[str]:
        return frozenset(self.value)

    @classmethod
    def from_alias(cls, alias: str) -> Optional['ArgumentKey']:
        for key in cls:
            if alias in key.aliases:
                return key
        return None


@dataclass(frozen=True)
class Argument:
    key: ArgumentKey
    value: str


def parse_argument(token: str) -> Optional[Argument]:
    """
    Parse a single ``flag=value`` token.

    Everything before the first ``=`` is the flag, the remainder is the
    value (it may itself contain ``=``). A token without ``=`` gets an
    empty value.

    Parameters
    ----------
    token : str
        Raw command line token

    Returns
    -------
    Optional[Argument]
        The typed argument, or None if the flag is not a known alias
    """
    flag, _, value = token.partition('=')
    key = ArgumentKey.from_alias(flag)
    if key is None:
        return None
    return Argument(key=key, value=value)


def parse_arguments(tokens: Iterable[str]) -> List[Argument]:
    """Parse all tokens, dropping those that are not overrides."""
    arguments = []
    for token in tokens:
        argument = parse_argument(token)
        if argument is not None:
            arguments.append(argument)
    return arguments


def is_argument(token: str) -> bool:
    return parse_argument(token) is not None


def first_value(arguments: Iterable[Argument], key: ArgumentKey) -> Optional[str]:
    """Return the value of the first argument with ``key``."""
    return next((argument.value for argument in arguments if argument.key == key), None)
