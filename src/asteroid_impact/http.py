"""Shared HTTP session for the NASA NEO API."""

from __future__ import annotations

from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from asteroid_impact import __version__


def create_session(
    api_key: str | None = None,
    retries: int = 3,
    backoff_factor: float = 0.5,
    status_forcelist: tuple[int, ...] = (429, 500, 502, 503, 504),
) -> Session:
    """Create a requests Session with exponential backoff retry.

    When *api_key* is given it is sent as the ``api_key`` query parameter
    on every request, as api.nasa.gov expects. 429 is retried because the
    shared DEMO_KEY runs out of hourly quota quickly.
    """
    retry = Retry(
        total=retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = Session()
    session.headers["User-Agent"] = f"asteroid-impact/{__version__}"
    if api_key:
        session.params = {"api_key": api_key}
    session.mount("https://", adapter)
    return session
