from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from hr_datatable.exceptions import PreferenceStoreError


class HttpPreferenceStore:
    """User preferences held by the backend API.

    ``GET {base_url}/preferences`` returns the whole preference object once;
    later reads are served from that copy. ``PUT {base_url}/preferences/{key}``
    writes one key with body ``{"value": ...}``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout_seconds: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = client or httpx.Client(timeout=timeout_seconds, headers=headers)
        self._cache: dict[str, Any] | None = None

    def _fetch(self) -> dict[str, Any]:
        try:
            response = self._client.get(f"{self.base_url}/preferences")
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise PreferenceStoreError(
                code="PREFERENCE_READ_FAILED",
                message="Could not load preferences from the API",
                details={"reason": str(exc)},
            ) from exc
        if isinstance(payload, dict) and isinstance(payload.get("preferences"), dict):
            payload = payload["preferences"]
        return payload if isinstance(payload, dict) else {}

    def get(self, key: str) -> Any | None:
        if self._cache is None:
            self._cache = self._fetch()
        return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:
        try:
            response = self._client.put(
                f"{self.base_url}/preferences/{quote(key, safe='')}",
                json={"value": value},
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise PreferenceStoreError(
                code="PREFERENCE_WRITE_FAILED",
                message="Could not save preference to the API",
                details={"key": key, "reason": str(exc)},
            ) from exc
        if self._cache is not None:
            self._cache[key] = value

    def close(self) -> None:
        self._client.close()
