"""HTTP client for a remote translation catalog service.

Fetches ``{base_url}/{locale}.json`` and merges the result into a
``TranslationStore``. Uses httpx for HTTP and tenacity for retry-on-error.
"""

from __future__ import annotations

import os
from typing import Any, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from translations.store import TranslationStore


def _is_retryable(exc: BaseException) -> bool:
    """Return True for transient service errors that should be retried."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in (429, 500, 502, 503)
    if isinstance(exc, (httpx.ConnectError, httpx.ReadTimeout)):
        return True
    return False


class RemoteCatalogClient:
    """Synchronous client for the catalog service.

    Reads ``LABELS_TRANSLATIONS_URL`` from the environment when no base URL
    is given. Retries on 429 / 5xx errors with exponential backoff.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url: str = (
            base_url or os.getenv("LABELS_TRANSLATIONS_URL", "")
        ).rstrip("/")
        self.timeout = timeout
        self._client: httpx.Client = httpx.Client(
            timeout=self.timeout, transport=transport
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2.0),
        retry=retry_if_exception(_is_retryable),
        reraise=True,
    )
    def fetch_catalog(self, locale: str) -> dict[str, Any]:
        """Fetch the catalog for *locale*.

        Raises:
            httpx.HTTPStatusError: On non-retryable HTTP errors.
            ValueError: If the body is not a JSON object.
        """
        resp = self._client.get(f"{self.base_url}/{locale}.json")
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"catalog for {locale!r} is not a JSON object")
        return data

    def load_into(self, store: TranslationStore, locales: list[str]) -> list[str]:
        """Fetch *locales* and merge them into *store*; returns loaded locales."""
        loaded: list[str] = []
        for locale in locales:
            store.store_translations(locale, self.fetch_catalog(locale))
            loaded.append(locale)
        return loaded

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            self._client.close()
