"""State shared by the commands of one invocation."""

from dataclasses import dataclass, field
from typing import List, Optional

from .arguments import Argument, ArgumentKey, first_value
from .clockify import ClockifyClient
from .config import Config


@dataclass(frozen=True)
class Context:
    """Typed overrides, loaded config and API client, built once at start-up."""

    config: Config
    client: ClockifyClient
    arguments: List[Argument] = field(default_factory=list)

    def override(self, key: ArgumentKey) -> Optional[str]:
        return first_value(self.arguments, key)
