"""HTTP client for the send-onboarding-email function."""

import os
from typing import Any

import httpx
import structlog

from rabt.utils.exceptions import NotificationError

logger = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 10.0


class NotificationClient:
    """Posts onboarding payloads to the notification function.

    Any failure (missing configuration, transport error, timeout or a non-2xx
    response) is raised as NotificationError.
    """

    def __init__(
        self,
        function_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize notification client.

        Args:
            function_url: Function endpoint. Falls back to NOTIFY_FUNCTION_URL env var.
            api_key: Key sent as bearer token and apikey header. Falls back to NOTIFY_API_KEY.
            timeout: Request timeout in seconds. Falls back to NOTIFY_TIMEOUT_SECONDS.
            http_client: Optional preconfigured httpx client.
        """
        self.function_url = function_url or os.environ.get("NOTIFY_FUNCTION_URL")
        self.api_key = api_key or os.environ.get("NOTIFY_API_KEY")
        self.timeout = timeout or float(
            os.environ.get("NOTIFY_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
        )
        self._client = http_client

    @property
    def client(self) -> httpx.Client:
        """Get HTTP client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["apikey"] = self.api_key
        return headers

    def notify(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send an onboarding payload.

        Args:
            payload: JSON body for the function.

        Returns:
            Parsed response body.

        Raises:
            NotificationError: If the notification was not accepted.
        """
        if not self.function_url:
            raise NotificationError("Notification endpoint is not configured")

        try:
            response = self.client.post(
                self.function_url,
                json=payload,
                headers=self._headers(),
            )
        except httpx.TimeoutException as e:
            raise NotificationError("Notification request timed out") from e
        except httpx.HTTPError as e:
            raise NotificationError(f"Notification request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {"text": response.text}

        if not response.is_success:
            raise NotificationError(
                f"Notification function returned {response.status_code}",
                status_code=response.status_code,
                response=data,
            )

        logger.debug(
            "Notification accepted",
            status_code=response.status_code,
            submission_id=payload.get("submissionId"),
        )

        return data
