"""Authentication against the remote service."""

from __future__ import annotations

import json

from ..infra.api_client import ApiClient
from ..logging_config import get_logger

logger = get_logger(__name__)

AUTH_PATH = "authenticate"


def authenticate(client: ApiClient, *, name: str, password: str) -> bool:
    """Return True when the server accepts the name/password pair.

    The endpoint answers with either JSON (interpreted by truthiness) or a
    bare ``true``/``false`` text body. Blank credentials are rejected without
    a request; transport and status failures propagate as NetworkError.
    """

    name = (name or "").strip()
    if not name or not password:
        return False

    response = client.send(
        "POST",
        AUTH_PATH,
        json={"name": name, "password": password},
        headers={"Accept": "application/json"},
    )
    body = (response.text or "").strip()
    try:
        accepted = bool(json.loads(body))
    except ValueError:
        accepted = body.lower() == "true"
    logger.info("Authentication attempt", extra={"user": name, "accepted": accepted})
    return accepted
