"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Client selector widget for Streamlit pages.

Provides a consistent client selection interface across multiple pages.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import streamlit as st

from utils.i18n import t


def select_client(
    clients: List[Dict[str, Any]],
    *,
    key: str,
    only_with_plan: bool = False,
    default_id: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Render a client selector and return the selected client.

    Args:
        clients: client records as returned by the users endpoint
        key: widget key, unique per page
        only_with_plan: offer only clients that have an active plan
        default_id: client preselected when present in the options

    Returns:
        Optional[dict]: Selected client or None if no client is available
    """
    candidates = [c for c in clients if c.get("activePlan")] if only_with_plan else list(clients)
    if not candidates:
        st.warning(t("clients.none_with_plan") if only_with_plan else t("clients.empty"))
        return None
    if only_with_plan and len(candidates) < len(clients):
        st.caption(t("calendar.modal.clients_without_plan", count=len(clients) - len(candidates)))
    ids = [str(c.get("id")) for c in candidates]
    labels = {
        str(c.get("id")): f"{c.get('name') or t('clients.unnamed')} ({c.get('email') or ''})"
        for c in candidates
    }
    index = ids.index(str(default_id)) if default_id and str(default_id) in ids else 0
    selected = st.selectbox(
        t("fields.clientId"),
        ids,
        index=index,
        format_func=lambda cid: labels.get(cid, cid),
        key=key,
    )
    return next((c for c in candidates if str(c.get("id")) == selected), None)
