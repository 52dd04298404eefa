"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

ID helpers for client-side draft entities.
"""

from __future__ import annotations

import uuid


def new_id() -> str:
    return str(uuid.uuid4())


def draft_id(prefix: str) -> str:
    """Temporary id for wizard items that do not exist server-side yet."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
