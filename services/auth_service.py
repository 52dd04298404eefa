"""Login, password recovery, account settings and trainer administration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import AdminTrainersRepo, AuthRepo, UsersRepo
from services.query_cache import QueryCache

LOGGER = logging.getLogger(__name__)

ROLE_TRAINER = "TRAINER"
ROLE_CLIENT = "CLIENT"
ROLE_ADMIN = "ADMIN"


def role_name(user: Optional[Dict[str, Any]]) -> Optional[str]:
    """The backend sends ``role`` either as ``{"name": ...}`` or a bare string."""
    if not user:
        return None
    role = user.get("role")
    if isinstance(role, dict):
        role = role.get("name")
    return str(role).upper() if role else None


def landing_page(user: Optional[Dict[str, Any]]) -> str:
    if role_name(user) == ROLE_ADMIN:
        return "pages/Admin.py"
    return "pages/Dashboard.py"


NavLink = Tuple[str, str, str]

NAV_LINKS: Dict[str, List[NavLink]] = {
    ROLE_TRAINER: [
        ("pages/Dashboard.py", "nav.dashboard", "📊"),
        ("pages/Clients.py", "nav.clients", "👥"),
        ("pages/Exercises.py", "nav.exercises", "🏋️"),
        ("pages/TrainingPlans.py", "nav.plans", "📋"),
        ("pages/Calendar.py", "nav.calendar", "🗓️"),
        ("pages/Inbox.py", "nav.inbox", "💬"),
        ("pages/Settings.py", "nav.settings", "⚙️"),
    ],
    ROLE_CLIENT: [
        ("pages/Dashboard.py", "nav.dashboard", "📊"),
        ("pages/MyPlan.py", "nav.my_plan", "📋"),
        ("pages/MyProgress.py", "nav.my_progress", "📈"),
        ("pages/Settings.py", "nav.settings", "⚙️"),
    ],
    ROLE_ADMIN: [
        ("pages/Admin.py", "nav.admin", "🛡️"),
        ("pages/Settings.py", "nav.settings", "⚙️"),
    ],
}


def nav_links(user: Optional[Dict[str, Any]]) -> List[NavLink]:
    """Pages offered on the home screen; unknown roles get the trainer set."""
    return NAV_LINKS.get(role_name(user) or "", NAV_LINKS[ROLE_TRAINER])


@dataclass
class AuthService:
    api: ApiClient
    cache: Optional[QueryCache] = None

    def __post_init__(self) -> None:
        self.auth = AuthRepo(self.api)
        self.users = UsersRepo(self.api)

    def login(self, email: str, password: str) -> Tuple[str, Dict[str, Any]]:
        payload = self.auth.login(email.strip(), password)
        token = payload.get("accessToken") or payload.get("access_token")
        user = payload.get("user") or {}
        if not token:
            raise ApiError(None, "Login response did not include an access token", payload)
        LOGGER.info("Logged in as %s (%s)", user.get("email"), role_name(user))
        return str(token), user

    def forgot_password(self, email: str) -> None:
        self.auth.forgot_password(email.strip())

    def reset_password(self, token: str, new_password: str) -> None:
        if not token:
            raise ValueError("Reset token is missing")
        self.auth.reset_password(token, new_password)

    def change_password(self, old_password: str, new_password: str) -> None:
        self.auth.change_password(old_password, new_password)

    def update_profile(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """PATCH the logged-in user's own profile and return the fields to merge locally."""
        response = self.users.update_profile(updates)
        merged = dict(updates)
        if isinstance(response, dict):
            merged.update({k: response[k] for k in updates if k in response})
        if self.cache is not None:
            self.cache.invalidate(("dashboard",))
        return merged


@dataclass
class AdminTrainersService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.trainers = AdminTrainersRepo(self.api)

    def list_trainers(self) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                return self.trainers.list()
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise

        return self.cache.fetch(("admin-trainers",), _load)

    def create_trainer(self, email: str, name: str, password: str) -> Any:
        created = self.trainers.create({"email": email, "name": name, "password": password})
        self.cache.invalidate(("admin-trainers",))
        return created

    def delete_trainer(self, trainer_id: str) -> None:
        self.trainers.delete(trainer_id)
        self.cache.invalidate(("admin-trainers",))

    def reset_password(self, trainer_id: str, new_password: str) -> None:
        self.trainers.reset_password(trainer_id, new_password)
