"""
Figma REST API client.

Only the local variables endpoint is used:
``GET https://api.figma.com/v1/files/:file_key/variables/local``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from figwind.errors import FigmaApiError
from figwind.figma.models import TokenDataset

logger = logging.getLogger(__name__)

FIGMA_API_URL = "https://api.figma.com/v1"


class FigmaClient:
    """HTTP client for the Figma REST API."""

    def __init__(
        self,
        token: str,
        base_url: str = FIGMA_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(
            timeout=timeout,
            headers={"X-Figma-Token": token},
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_local_variables(self, file_key: str) -> dict[str, Any]:
        """
        Fetch the raw local variables response for a file.

        Raises:
            FigmaApiError: On transport failures, non-2xx responses or a non-JSON body
        """
        url = f"{self.base_url}/files/{file_key}/variables/local"
        logger.debug("GET %s", url)

        try:
            resp = self.client.get(url)
        except httpx.HTTPError as e:
            raise FigmaApiError("Failed to fetch Figma variables", f"network error: {e}") from e

        if not resp.is_success:
            raise FigmaApiError(
                "Failed to fetch Figma variables",
                f"API error: {resp.status_code} {resp.reason_phrase} - {resp.text}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise FigmaApiError("Failed to fetch Figma variables", "invalid JSON response") from e


def fetch_figma_variables(
    file_key: str,
    token: str,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """
    Fetch local variables of a Figma file, showing a spinner while waiting.

    Args:
        file_key: File key from the Figma URL
        token: Personal access token
        transport: Optional httpx transport (tests use httpx.MockTransport)

    Returns:
        Raw API response (``{"status", "error", "meta"}``)
    """
    from figwind.cli_ui import console

    with console.status("Fetching Figma variables..."):
        with FigmaClient(token, transport=transport) as client:
            return client.get_local_variables(file_key)


def load_dataset(payload: dict[str, Any]) -> TokenDataset:
    """
    Parse a raw API response into a dataset.

    Raises:
        FigmaApiError: If the response reports an error or has an unexpected shape
    """
    if not isinstance(payload, dict):
        raise FigmaApiError(
            "Unexpected Figma variables response",
            f"expected an object, got {type(payload).__name__}",
        )
    if payload.get("error") is True:
        raise FigmaApiError(
            "Figma API reported an error", str(payload.get("message") or payload.get("status"))
        )
    try:
        return TokenDataset.from_response(payload)
    except ValueError as e:
        raise FigmaApiError("Unexpected Figma variables response", str(e)) from e
