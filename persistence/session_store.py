"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Per-browser login sessions persisted on the server.

Each browser holds an opaque random session id in a cookie; the access token
and user returned by ``/auth/login`` live in ``<directory>/<session id>.json``
so that a browser refresh does not log the trainer out. Ids that do not look
like ours are ignored. When an encryption key is configured the token is
stored Fernet-encrypted.
"""

from __future__ import annotations

import json
import logging
import re
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import portalocker

from utils.crypto import decrypt_text, encrypt_text, get_fernet

LOGGER = logging.getLogger(__name__)

_SESSION_ID = re.compile(r"^[A-Za-z0-9_-]{32,128}$")


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def is_session_id(value: Optional[str]) -> bool:
    return bool(value) and bool(_SESSION_ID.match(str(value)))


@dataclass
class SessionStore:
    directory: Path
    encryption_key: Optional[str] = None

    def __post_init__(self) -> None:
        self._fernet = get_fernet(self.encryption_key)

    def _path(self, session_id: str) -> Path:
        if not is_session_id(session_id):
            raise ValueError("Malformed session id")
        return self.directory / f"{session_id}.json"

    def save(self, session_id: str, token: str, user: Dict[str, Any]) -> None:
        path = self._path(session_id)
        self.directory.mkdir(parents=True, exist_ok=True)
        stored_token = encrypt_text(self._fernet, token) if self._fernet else token
        payload = {
            "token": stored_token,
            "encrypted": self._fernet is not None,
            "user": user,
        }
        data = json.dumps(payload)
        with portalocker.Lock(str(path), mode="a", timeout=10, flags=portalocker.LOCK_EX):
            path.write_text(data, encoding="utf-8")

    def load(self, session_id: Optional[str]) -> Optional[Tuple[str, Dict[str, Any]]]:
        """Return ``(token, user)`` or None; unreadable files are discarded."""
        if not is_session_id(session_id):
            return None
        path = self._path(str(session_id))
        if not path.exists():
            return None
        with portalocker.Lock(str(path), mode="a", timeout=10, flags=portalocker.LOCK_SH):
            raw = path.read_text(encoding="utf-8")
        try:
            payload = json.loads(raw)
            token = payload["token"]
            user = payload.get("user") or {}
            if payload.get("encrypted"):
                if self._fernet is None:
                    raise RuntimeError("Stored session is encrypted but no ENCRYPTION_KEY is set")
                token = decrypt_text(self._fernet, token)
        except (ValueError, KeyError, TypeError, RuntimeError) as exc:
            LOGGER.warning("Discarding unreadable session file %s: %s", path.name, exc)
            self.clear(str(session_id))
            return None
        if not token:
            return None
        return token, user

    def update_user(self, session_id: str, user: Dict[str, Any]) -> None:
        current = self.load(session_id)
        if current is None:
            return
        token, _ = current
        self.save(session_id, token, user)

    def clear(self, session_id: Optional[str]) -> None:
        if not is_session_id(session_id):
            return
        try:
            self._path(str(session_id)).unlink()
        except FileNotFoundError:
            pass
