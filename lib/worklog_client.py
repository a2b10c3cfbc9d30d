"""Worklog API Client.

This module provides a Python interface to the developer-activity endpoint.

Example usage:
    >>> from lib.worklog_client import WorklogAPIClient
    >>>
    >>> with WorklogAPIClient("https://dec-backend-2.onrender.com/data") as client:
    ...     roster = client.get_worklog()
    >>> for developer in roster:
    ...     print(f"{developer.name}: {len(developer.day_wise_activity)} days")
"""

import json
import logging
from pathlib import Path
from typing import Any, List
from urllib.parse import unquote, urlparse

import requests

from lib.models import FALLBACK_COLOR, Developer, WorklogFormatError, parse_worklog

logger = logging.getLogger(__name__)


class WorklogAPIClient:
    """Client for the worklog endpoint.

    Issues a single unauthenticated GET and turns the JSON body into a
    list of Developer records. ``file://`` URLs are read from disk, which
    lets the dashboard run against a payload written by
    scripts/generate_sample_worklog.py.
    """

    def __init__(self, data_url: str, timeout: float = 30, default_color: str = FALLBACK_COLOR):
        """Initialize API client.

        Args:
            data_url: Full URL of the worklog resource
            timeout: Request timeout in seconds
            default_color: Colour for metric items without a fillColor
        """
        self.data_url = data_url
        self.timeout = timeout
        self.default_color = default_color
        self.session = requests.Session()

        # Set common headers
        self.session.headers['User-Agent'] = 'Worklog-Dashboard-Client/1.0'
        self.session.headers['Accept'] = 'application/json'

    def get_payload(self) -> Any:
        """Fetch the raw decoded JSON body.

        Returns:
            Decoded JSON document

        Raises:
            TimeoutError: If the request times out
            ConnectionError: If the host cannot be reached
            RuntimeError: If the server answers with a non-2xx status
            WorklogFormatError: If the body is not valid JSON
        """
        if self.data_url.startswith('file://'):
            return self._read_file_payload()

        try:
            response = self.session.get(self.data_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise TimeoutError(f'Request timed out after {self.timeout} seconds')
        except requests.exceptions.ConnectionError:
            raise ConnectionError(f'Could not connect to {self.data_url}')
        except requests.exceptions.RequestException as e:
            raise RuntimeError(f'Failed to fetch worklog: {str(e)}')

        try:
            return response.json()
        except ValueError as e:
            raise WorklogFormatError(f'Worklog response is not valid JSON: {e}')

    def _read_file_payload(self) -> Any:
        path = Path(unquote(urlparse(self.data_url).path))
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            raise ConnectionError(f'Worklog file not found: {path}')
        except OSError as e:
            raise ConnectionError(f'Could not read worklog file {path}: {e}')
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise WorklogFormatError(f'Worklog file is not valid JSON: {e}')

    def get_worklog(self) -> List[Developer]:
        """Fetch and parse the developer roster.

        Returns:
            Developers in the order the server returned them

        Raises:
            TimeoutError, ConnectionError, RuntimeError: On transport failures
            WorklogFormatError: If the body does not contain AuthorWorklog.rows
        """
        payload = self.get_payload()
        roster = parse_worklog(payload, default_color=self.default_color)
        logger.info(f"Fetched worklog for {len(roster)} developers from {self.data_url}")
        return roster

    def close(self):
        """Close the session and cleanup resources."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
