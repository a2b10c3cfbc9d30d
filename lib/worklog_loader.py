"""One-shot worklog loading for a dashboard session.

The roster is fetched once per session, on the first script run. Whatever
the outcome, the loading flag is cleared; failures are logged and leave the
roster empty so the page shows its "no data" message.
"""

import logging
from typing import Callable, Optional

from lib.models import WorklogFormatError
from lib.session_state import DashboardStatus, get_state, get_status, update_worklog_state
from lib.worklog_client import WorklogAPIClient

logger = logging.getLogger(__name__)

FETCH_ERRORS = (TimeoutError, ConnectionError, RuntimeError, WorklogFormatError)


def load_worklog(client_factory: Optional[Callable[[], WorklogAPIClient]] = None) -> DashboardStatus:
    """Fetch the roster into session state unless this session already did.

    Args:
        client_factory: Builds the API client; defaults to one configured
            from the session's data_url and request_timeout

    Returns:
        The dashboard status after loading
    """
    if not get_state('worklog_loading', True):
        return get_status()

    if client_factory is None:
        def client_factory():
            return WorklogAPIClient(
                get_state('data_url'),
                timeout=get_state('request_timeout', 30),
                default_color=get_state('default_color', '#8884d8'),
            )

    try:
        with client_factory() as client:
            roster = client.get_worklog()
    except FETCH_ERRORS as e:
        logger.error(f"Error fetching data: {e}")
        update_worklog_state(error=str(e))
    else:
        update_worklog_state(roster=roster)

    return get_status()
