"""Numbers API client.

A thin wrapper around the four ``/api/numbers`` endpoints for scripts
and tests that want to drive the service the way the browser UI does.
The client keeps a single ``requests.Session`` for its whole lifetime so
that the session cookie issued by the server is replayed on every call;
creating a new client therefore starts a new, empty collection.

Every method returns a tuple ``(data, error)``.  On success ``data`` is
the parsed response (a dict with ``numbers``, ``count`` and ``sum``) and
``error`` is ``None``.  On failure ``data`` is ``None`` and ``error`` is
a dict with ``status_code`` and ``message``; server failures carry a
plain text message as their body, which becomes ``message`` as is.

Example::

    client = NumbersClient(base_url="http://localhost:8000")
    client.add_number()
    view, error = client.get_sum()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class NumbersClient:
    """Client for the session‑scoped numbers API."""

    api_prefix = "/api/numbers"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str = "") -> Result:
        """Perform an HTTP request against ``api_prefix + path``."""
        url = f"{self.base_url}{self.api_prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Number operations
    # ------------------------------------------------------------------
    def list_numbers(self) -> Result:
        """Retrieve the numbers stored in the current session."""
        return self._request("GET")

    def add_number(self) -> Result:
        """Ask the server to append a random number."""
        return self._request("POST", "/add")

    def clear_numbers(self) -> Result:
        """Remove all numbers from the current session."""
        return self._request("POST", "/clear")

    def get_sum(self) -> Result:
        """Retrieve the numbers together with their sum."""
        return self._request("GET", "/sum")

    def close(self) -> None:
        self.session.close()
