"""Loading of the config.json file holding the API key and defaults."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('config.json')


class ConfigError(Exception):
    """Raised when the config file is missing or invalid."""


@dataclass(frozen=True)
class Config:
    api_key: str
    workspace_id: Optional[str] = None
    project_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """
        Build the config from the decoded JSON object.

        Parameters
        ----------
        data : Dict[str, Any]
            Object with ``apiKey`` and optional ``workspaceID``/``projectID``

        Returns
        -------
        Config
            The validated config

        Raises
        ------
        ConfigError
            If ``apiKey`` is missing or a field has the wrong type
        """
        api_key = data.get('apiKey')
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigError("apiKey is missing")

        for field in ('workspaceID', 'projectID'):
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{field} must be a string")

        return cls(
            api_key=api_key.strip(),
            workspace_id=data.get('workspaceID') or None,
            project_id=data.get('projectID') or None,
        )


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Config:
    """Read and validate the config file at ``path``."""
    config_path = Path(path)
    logger.debug("Loading config from %s", config_path.resolve())

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    config = Config.from_dict(data)
    logger.debug(
        "Config loaded: workspaceID=%s, projectID=%s",
        config.workspace_id,
        config.project_id
    )
    return config
