"""Clockify API client for listing workspaces/projects and adding time entries."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
from dateutil import tz

from . import __version__

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.clockify.me/api/v1"

T = TypeVar('T', bound='NamedResource')


class ClockifyError(Exception):
    """Raised when a Clockify request fails or returns unusable data."""


@dataclass(frozen=True)
class NamedResource:
    id: str
    name: str

    @classmethod
    def from_json(cls: Type[T], data: Any) -> T:
        if not isinstance(data, dict):
            raise ClockifyError(f"Unexpected item in response: {data!r}")
        try:
            return cls(id=str(data['id']), name=str(data['name']))
        except KeyError as e:
            raise ClockifyError(f"Field {e} missing in response item") from e


class Workspace(NamedResource):
    def __str__(self) -> str:
        return f"[Workspace {self.id}] {self.name}"


class Project(NamedResource):
    def __str__(self) -> str:
        return f"[Project {self.id}] {self.name}"


def to_iso8601(value: datetime) -> str:
    """Format ``value`` as an ISO-8601 UTC timestamp, naive values being local time."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz.tzlocal())
    return value.astimezone(tz.UTC).strftime('%Y-%m-%dT%H:%M:%SZ')


@dataclass(frozen=True)
class TimeEntry:
    start: datetime
    end: datetime
    description: str
    project_id: str

    def to_payload(self) -> Dict[str, str]:
        return {
            'start': to_iso8601(self.start),
            'end': to_iso8601(self.end),
            'description': self.description,
            'projectId': self.project_id,
        }


class ClockifyClient:
    """Client for interacting with the Clockify API."""

    def __init__(self, api_key: str, api_url: Optional[str] = None):
        """
        Initialize the client.

        Parameters
        ----------
        api_key : str
            Clockify API key sent in the ``X-Api-Key`` header
        api_url : Optional[str]
            Base URL, defaults to ``CLOCKIFY_API_URL`` or the public API
        """
        self.api_url = (api_url or os.getenv("CLOCKIFY_API_URL") or DEFAULT_API_URL).rstrip('/')
        self.api_key = api_key.strip()

        # Store masked version of key for logging
        self.masked_key = f"{self.api_key[:4]}...{self.api_key[-4:]}" if len(self.api_key) > 8 else "***"
        logger.debug("Using API key: %s", self.masked_key)

        self.session = requests.Session()
        self.session.headers.update({
            "X-Api-Key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"clockify-report/{__version__}"
        })

    def _mask_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Mask the API key in headers for logging."""
        return {
            k: self.masked_key if k == 'X-Api-Key' else v
            for k, v in headers.items()
        }

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> requests.Response:
        url = f'{self.api_url}{path}'
        logger.debug("Making %s request to %s with body %s", method, url, payload)
        logger.debug("Request headers: %s", self._mask_headers(dict(self.session.headers)))

        try:
            response = self.session.request(method, url, json=payload)
        except requests.exceptions.RequestException as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise ClockifyError(str(e)) from e

        if response.status_code == 401:
            logger.debug(
                "Authentication failed. Please check the apiKey in your config. Response: %s",
                response.text
            )
        elif response.status_code == 404:
            logger.debug("API endpoint not found. Response: %s", response.text)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise ClockifyError(
                f"API error {response.status_code}: {response.text or response.reason}"
            ) from e

        return response

    def _get_list(self, path: str, resource: Type[T]) -> List[T]:
        response = self._request('GET', path)
        try:
            items = response.json()
        except ValueError as e:
            raise ClockifyError(f"Invalid JSON in response: {e}") from e

        if not isinstance(items, list):
            raise ClockifyError(f"Expected a list in response, got {type(items).__name__}")

        result = [resource.from_json(item) for item in items]
        logger.debug("Retrieved %d items from %s", len(result), path)
        return result

    def get_workspaces(self) -> List[Workspace]:
        """Fetch the workspaces the API key has access to."""
        return self._get_list('/workspaces', Workspace)

    def get_projects(self, workspace_id: str) -> List[Project]:
        """
        Fetch the projects of a workspace.

        Parameters
        ----------
        workspace_id : str
            ID of the workspace

        Returns
        -------
        List[Project]
            Projects in the workspace
        """
        return self._get_list(f'/workspaces/{workspace_id}/projects', Project)

    def add_time_entry(self, workspace_id: str, entry: TimeEntry) -> None:
        """
        Create a time entry in a workspace.

        Parameters
        ----------
        workspace_id : str
            ID of the workspace
        entry : TimeEntry
            The entry to create
        """
        self._request('POST', f'/workspaces/{workspace_id}/time-entries', entry.to_payload())
        logger.debug("Time entry created in workspace %s", workspace_id)
