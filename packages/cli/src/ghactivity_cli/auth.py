"""GitHub token resolution with gh CLI fallback.

The events endpoint is public, so a token is optional. Sending one raises
the unauthenticated rate limit (60 requests/hour) to the authenticated one.

Resolution order (stops at first success):
  1. GITHUB_TOKEN environment variable
  2. `gh auth token` (GitHub CLI session, works after `gh auth login`)
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)


def resolve_github_token() -> str | None:
    """Return a GitHub token or None if no source is available.

    Never raises; None means requests go out unauthenticated.
    """
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        logger.debug("Using GitHub token from GITHUB_TOKEN.")
        return token

    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0:
            gh_token = result.stdout.strip()
            if gh_token:
                logger.debug("Resolved GitHub token via gh CLI session.")
                return gh_token
    except (FileNotFoundError, subprocess.TimeoutExpired):
        # gh is not installed or timed out.
        pass

    logger.debug("No GitHub token found; requests will be unauthenticated.")
    return None
