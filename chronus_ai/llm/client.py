"""
Provider Transport - Send a ProviderRequest over HTTP.

Kept separate from the adapters so the adapters stay pure (no I/O) and
the HTTP session can be swapped in tests. Every call has a finite
timeout; no retries are made.
"""
from typing import Any, Dict, Optional

import requests

from chronus_ai.core.config import DEFAULT_TIMEOUT_SECONDS
from chronus_ai.core.exceptions import TransportError
from chronus_ai.core.logging_config import get_logger
from chronus_ai.llm.providers import ProviderRequest

logger = get_logger(__name__)


def send_request(
    request: ProviderRequest,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    POST a provider request and return the decoded JSON envelope.

    Args:
        request: Request built by a ProviderAdapter
        timeout: Seconds before the call is abandoned
        session: Optional requests session (defaults to a one-off request)

    Returns:
        The response body as a dict

    Raises:
        TransportError: On connection errors, timeouts, non-2xx status,
            or a body that is not a JSON object
    """
    http = session or requests
    headers = {"Content-Type": "application/json", **request.headers}

    try:
        response = http.post(
            request.url,
            json=request.body,
            headers=headers,
            params=request.params or None,
            timeout=timeout,
        )
    except requests.exceptions.Timeout as e:
        raise TransportError(f"Provider timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Provider request failed: {e.__class__.__name__}") from e

    if not 200 <= response.status_code < 300:
        logger.debug(f"Provider error body: {response.text[:300]!r}")
        raise TransportError(
            f"Provider returned HTTP {response.status_code}",
            status=response.status_code,
        )

    try:
        body = response.json()
    except ValueError as e:
        raise TransportError("Provider returned a non-JSON body", status=response.status_code) from e

    if not isinstance(body, dict):
        raise TransportError("Provider returned a non-object JSON body", status=response.status_code)

    return body
