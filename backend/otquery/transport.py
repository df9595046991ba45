import logging
from typing import Any, Dict, Optional

import httpx

from .constants import OT_API_URL, OT_TIMEOUT
from .exceptions import ParseError, TransportError

logger = logging.getLogger(__name__)


def post_graphql(
    query_text: str,
    variables: Dict[str, Any],
    client: Optional[httpx.Client] = None,
    url: str = OT_API_URL,
    timeout: float = OT_TIMEOUT,
) -> Dict[str, Any]:
    """
    POST one GraphQL document and return the decoded JSON body.

    A caller-supplied ``client`` is reused (and left open); otherwise a
    short-lived client is created for this single request.

    Raises:
        TransportError: non-2xx status, connection failure or timeout.
        ParseError: body is not a JSON object.
    """
    body = {"query": query_text, "variables": variables}

    try:
        if client is not None:
            resp = client.post(url, json=body, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout) as short_lived:
                resp = short_lived.post(url, json=body)
    except httpx.HTTPError as exc:
        raise TransportError(f"Request failed: {exc}") from exc

    if not resp.is_success:
        raise TransportError(
            f"Request failed: {resp.status_code} {resp.reason_phrase}",
            status_code=resp.status_code,
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise ParseError(f"Invalid JSON in response: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    errors = payload.get("errors")
    if errors:
        messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
        logger.warning("GraphQL errors: %s", "; ".join(messages))

    return payload
