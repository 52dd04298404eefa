"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Session state helpers for Streamlit.

The login lives in ``st.session_state``, which Streamlit keeps per browser
tab. To survive a refresh, the browser also carries an opaque session id in
a cookie that points at its own server-side session file.
"""

from __future__ import annotations

import hashlib
from typing import Any, Dict, Optional

import streamlit as st
import streamlit.components.v1 as components
from streamlit.logger import get_logger

from persistence.api_client import ApiClient
from persistence.session_store import SessionStore, new_session_id
from services.auth_service import role_name
from services.query_cache import QueryCache
from utils.config import Config
from utils.i18n import set_language

logger = get_logger(__name__)

AUTH_TOKEN = "auth_token"
AUTH_USER = "auth_user"
SESSION_ID = "session_id"
SESSION_RESTORED = "session_restored"
COOKIE_PENDING = "session_cookie_pending"
QUERY_CACHE = "query_cache"
LANGUAGE = "language"
FLASH = "flash"

SESSION_COOKIE = "trainer_console_session"
COOKIE_MAX_AGE = 30 * 24 * 3600


def init_session_state(cfg: Config) -> None:
    if AUTH_TOKEN not in st.session_state:
        st.session_state[AUTH_TOKEN] = None
    if AUTH_USER not in st.session_state:
        st.session_state[AUTH_USER] = None
    if SESSION_ID not in st.session_state:
        st.session_state[SESSION_ID] = None
    if SESSION_RESTORED not in st.session_state:
        st.session_state[SESSION_RESTORED] = False
    if LANGUAGE not in st.session_state:
        st.session_state[LANGUAGE] = cfg.default_language
    set_language(st.session_state[LANGUAGE])


def _store(cfg: Config) -> SessionStore:
    return SessionStore(cfg.sessions_dir, cfg.encryption_key)


def browser_session_id() -> Optional[str]:
    """Session id sent by this browser, if any."""
    return st.context.cookies.get(SESSION_COOKIE)


def session_cookie_script(session_id: Optional[str]) -> str:
    """Script that sets the session cookie, or expires it when there is no id."""
    value, max_age = (session_id, COOKIE_MAX_AGE) if session_id else ("", 0)
    cookie = f"{SESSION_COOKIE}={value}; path=/; max-age={max_age}; SameSite=Strict"
    return f'<script>window.parent.document.cookie = "{cookie}";</script>'


def write_session_cookie() -> None:
    """Flush a pending cookie change to the browser; called once per page run."""
    if COOKIE_PENDING not in st.session_state:
        return
    pending = st.session_state.pop(COOKIE_PENDING)
    components.html(session_cookie_script(pending), height=0)


def restore_session(cfg: Config) -> None:
    """Load this browser's persisted session once per browser session."""
    init_session_state(cfg)
    if st.session_state[SESSION_RESTORED]:
        return
    st.session_state[SESSION_RESTORED] = True
    if st.session_state[AUTH_TOKEN]:
        return
    session_id = browser_session_id()
    loaded = _store(cfg).load(session_id)
    if loaded is None:
        return
    token, user = loaded
    st.session_state[AUTH_TOKEN] = token
    st.session_state[AUTH_USER] = user
    st.session_state[SESSION_ID] = session_id
    logger.debug("Restored session for %s", user.get("email"))


def login(cfg: Config, token: str, user: Dict[str, Any]) -> None:
    store = _store(cfg)
    store.clear(st.session_state.get(SESSION_ID))
    session_id = new_session_id()
    st.session_state[AUTH_TOKEN] = token
    st.session_state[AUTH_USER] = user
    st.session_state[SESSION_ID] = session_id
    store.save(session_id, token, user)
    st.session_state[COOKIE_PENDING] = session_id
    st.session_state.pop(QUERY_CACHE, None)


def logout(cfg: Config) -> None:
    """Forget this browser's login; other browsers keep theirs."""
    cache = st.session_state.pop(QUERY_CACHE, None)
    if cache is not None:
        cache.clear()
    _store(cfg).clear(st.session_state.get(SESSION_ID))
    st.session_state[AUTH_TOKEN] = None
    st.session_state[AUTH_USER] = None
    st.session_state[SESSION_ID] = None
    st.session_state[COOKIE_PENDING] = None


def is_authenticated() -> bool:
    return bool(st.session_state.get(AUTH_TOKEN))


def current_token() -> Optional[str]:
    return st.session_state.get(AUTH_TOKEN)


def current_user() -> Dict[str, Any]:
    return st.session_state.get(AUTH_USER) or {}


def current_role() -> Optional[str]:
    return role_name(current_user())


def update_current_user(cfg: Config, partial: Dict[str, Any]) -> None:
    user = {**current_user(), **partial}
    st.session_state[AUTH_USER] = user
    session_id = st.session_state.get(SESSION_ID)
    if session_id:
        _store(cfg).update_user(session_id, user)


def _cache_scope() -> str:
    token = current_token()
    if not token:
        return "anonymous"
    return hashlib.sha256(token.encode()).hexdigest()[:24]


def get_query_cache(cfg: Config) -> QueryCache:
    """This user's query cache; a new login gets a new scope."""
    scope = _cache_scope()
    cache = st.session_state.get(QUERY_CACHE)
    if cache is None or cache.scope != scope or cache.ttl_seconds != cfg.cache_ttl:
        cache = QueryCache(ttl_seconds=cfg.cache_ttl, scope=scope)
        st.session_state[QUERY_CACHE] = cache
    return cache


def get_api_client(cfg: Config) -> ApiClient:
    def _on_unauthorized() -> None:
        logout(cfg)
        st.session_state[FLASH] = ("warning", "auth.session_expired")

    return ApiClient(
        base_url=cfg.api_url,
        token_provider=current_token,
        on_unauthorized=_on_unauthorized,
        timeout=cfg.request_timeout,
    )


def require_login(cfg: Config, *roles: str) -> Dict[str, Any]:
    """Send anonymous visitors (or the wrong role) back to the login page."""
    restore_session(cfg)
    if not is_authenticated():
        st.switch_page("app.py")
    if roles and current_role() not in roles:
        st.session_state[FLASH] = ("error", "auth.forbidden")
        st.switch_page("app.py")
    return current_user()
