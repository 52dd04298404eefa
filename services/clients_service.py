"""Client (role CLIENT user) queries and mutations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import AuthRepo, UsersRepo
from services.auth_service import ROLE_CLIENT, role_name
from services.query_cache import QueryCache

LOGGER = logging.getLogger(__name__)

DEFAULT_AVATAR = "/avatars/avatar-01.png"


@dataclass
class ClientsService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.users = UsersRepo(self.api)
        self.auth = AuthRepo(self.api)

    # --- Queries ----------------------------------------------------
    def list_clients(self) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                users = self.users.list()
            except ApiError as exc:
                if is_missing(exc):
                    LOGGER.warning("Client list unavailable (%s); showing none", exc.status_code)
                    return []
                raise
            return [u for u in users if role_name(u) == ROLE_CLIENT]

        return self.cache.fetch(("clients",), _load)

    def get_client(self, client_id: str) -> Optional[Dict[str, Any]]:
        if not client_id:
            return None

        def _load() -> Optional[Dict[str, Any]]:
            try:
                return self.users.get(client_id)
            except ApiError as exc:
                if exc.is_not_found:
                    return None
                raise

        return self.cache.fetch(("clients", str(client_id)), _load)

    def clients_with_plan(self) -> List[Dict[str, Any]]:
        return [c for c in self.list_clients() if c.get("activePlan")]

    # --- Mutations --------------------------------------------------
    def create_client(
        self,
        email: str,
        name: str,
        password: str,
        avatar_url: Optional[str] = None,
    ) -> Any:
        body = {
            "email": email,
            "name": name,
            "password": password,
            "avatarUrl": avatar_url or DEFAULT_AVATAR,
            "role": ROLE_CLIENT,
        }
        created = self.auth.register(body)
        self.cache.invalidate(("clients",), ("dashboard",))
        return created

    def update_client(self, client_id: str, updates: Dict[str, Any]) -> Any:
        updated = self.users.update(client_id, updates)
        self.cache.invalidate(("clients", str(client_id)), ("clients",))
        return updated

    def delete_client(self, client_id: str) -> None:
        self.users.delete(client_id)
        self.cache.invalidate(("clients",), ("dashboard",))

    def assign_plan(self, client_id: str, plan_id: Optional[str]) -> Any:
        result = self.users.assign_plan(client_id, plan_id or None)
        self.cache.invalidate(("clients", str(client_id)), ("clients",), ("dashboard",))
        return result
