"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Fernet helpers used to keep the persisted session token unreadable on disk.
"""

from __future__ import annotations

from typing import Optional

from cryptography.fernet import Fernet, InvalidToken


def get_fernet(encryption_key: Optional[str]) -> Optional[Fernet]:
    """Return a Fernet instance, or None when no key is configured."""
    if not encryption_key:
        return None
    try:
        return Fernet(encryption_key.encode())
    except (ValueError, TypeError) as e:
        raise RuntimeError(
            "ENCRYPTION_KEY is not a valid Fernet key. Generate one with: "
            "from cryptography.fernet import Fernet; print(Fernet.generate_key().decode())"
        ) from e


def encrypt_text(fernet: Fernet, text: str) -> str:
    return fernet.encrypt(text.encode()).decode()


def decrypt_text(fernet: Fernet, token: str) -> str:
    try:
        return fernet.decrypt(token.encode()).decode()
    except InvalidToken as e:
        raise RuntimeError("Invalid encryption token; check ENCRYPTION_KEY") from e
