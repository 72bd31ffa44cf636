from __future__ import annotations

import logging
from urllib.parse import quote

import requests
from github import Auth, Github, GithubException

from ghactivity_core.decode import decode_events
from ghactivity_core.errors import TransportFailure, UserNotFound
from ghactivity_core.models import Event

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
EVENTS_PATH = "/users/{username}/events"


def get_client(token: str | None = None, base_url: str = DEFAULT_API_URL, timeout: int = 15) -> Github:
    """Build a PyGithub client; anonymous when no token is given.

    PyGithub's own retry policy is switched off: a failed fetch is reported,
    never retried.
    """
    auth = Auth.Token(token) if token else None
    return Github(auth=auth, base_url=base_url, timeout=timeout, retry=None)


def fetch_events(client: Github, username: str, per_page: int = 30) -> list[Event]:
    """Issue one ``GET /users/<username>/events`` and decode the body."""
    path = EVENTS_PATH.format(username=quote(username, safe=""))
    logger.debug("GET %s (per_page=%d)", path, per_page)

    try:
        _, body = client.requester.requestJsonAndCheck("GET", path, parameters={"per_page": per_page})
    except GithubException as e:
        if e.status == 404:
            raise UserNotFound(username) from e
        raise TransportFailure(f"Received bad status code: {e.status}", status=e.status) from e
    except requests.RequestException as e:
        raise TransportFailure(f"Network error: {e}") from e

    return decode_events(body)
