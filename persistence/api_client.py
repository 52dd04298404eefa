"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Shared HTTP client for the training backend.

Every request goes through one ``requests.Session``. The bearer token is read
lazily from a provider so that logging in or out takes effect on the next
request without rebuilding the client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import requests

LOGGER = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."
LOGIN_PATH = "/auth/login"


class ApiError(RuntimeError):
    """A non-2xx answer from the backend (or a transport failure)."""

    def __init__(self, status_code: Optional[int], message: Optional[str], payload: Any = None):
        super().__init__(message or GENERIC_ERROR)
        self.status_code = status_code
        # Backend-provided text only; None when the answer carried no message
        self.detail = message or None
        self.message = message or GENERIC_ERROR
        self.payload = payload

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class UnauthorizedError(ApiError):
    """401: the stored token is missing, expired or revoked."""


def extract_message(payload: Any, fallback: str = GENERIC_ERROR) -> str:
    """Pull the human-readable message out of an error body.

    The backend answers ``{"message": "..."}`` or, for validation errors,
    ``{"message": ["a", "b"]}``.
    """
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, list):
            parts = [str(m).strip() for m in message if str(m).strip()]
            if parts:
                return ". ".join(parts)
        elif isinstance(message, str) and message.strip():
            return message.strip()
        error = payload.get("error")
        if isinstance(error, str) and error.strip():
            return error.strip()
    return fallback


def is_missing(exc: Exception) -> bool:
    """True for answers that list queries treat as "no data" (404/500)."""
    return isinstance(exc, ApiError) and exc.status_code in (404, 500)


@dataclass
class ApiClient:
    base_url: str
    token_provider: Callable[[], Optional[str]] = lambda: None
    on_unauthorized: Optional[Callable[[], None]] = None
    session: Optional[requests.Session] = None
    timeout: float = 15.0

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        self.session = self.session or requests.Session()

    # --- Public API -------------------------------------------------
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json_payload: Any = None) -> Any:
        return self.request("POST", path, json_payload=json_payload)

    def patch(self, path: str, json_payload: Any = None) -> Any:
        return self.request("PATCH", path, json_payload=json_payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_payload: Any = None,
    ) -> Any:
        url = self.url_for(path)
        LOGGER.debug("%s %s", method, path)
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._headers(),
                params=_drop_none(params),
                json=json_payload,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            LOGGER.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(None, None) from exc

        if 200 <= response.status_code < 300:
            if response.content and response.content.strip():
                try:
                    return response.json()
                except ValueError as exc:
                    raise ApiError(response.status_code, "Backend returned non-JSON response") from exc
            return None

        payload = _safe_json(response)
        message = extract_message(payload, fallback="")
        LOGGER.warning("%s %s -> %s: %s", method, path, response.status_code, message)
        if response.status_code == 401:
            if path.rstrip("/") != LOGIN_PATH and self.on_unauthorized is not None:
                LOGGER.info("Session rejected by backend; clearing local session")
                self.on_unauthorized()
            raise UnauthorizedError(401, message, payload)
        raise ApiError(response.status_code, message, payload)

    # --- Helpers ----------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers


def _drop_none(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    cleaned = {k: v for k, v in params.items() if v is not None and v != ""}
    return cleaned or None


def _safe_json(response: Any) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def as_list(payload: Any, key: Optional[str] = None) -> List[Dict[str, Any]]:
    """Normalise list endpoints answering either ``[...]`` or ``{key: [...]}``."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if key and isinstance(payload.get(key), list):
            return payload[key]
        if isinstance(payload.get("data"), list):
            return payload["data"]
    return []
