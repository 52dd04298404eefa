"""Client consultations (inbox) and their message threads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import ConsultationsRepo
from services.query_cache import QueryCache

STATUS_OPEN = "OPEN"
STATUS_RESOLVED = "RESOLVED"
FILTERS = ("ALL", STATUS_OPEN, STATUS_RESOLVED)


def count_by_status(consultations: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    items = list(consultations)
    return {
        "ALL": len(items),
        STATUS_OPEN: sum(1 for c in items if c.get("status") == STATUS_OPEN),
        STATUS_RESOLVED: sum(1 for c in items if c.get("status") == STATUS_RESOLVED),
    }


def filter_by_status(consultations: Iterable[Dict[str, Any]], status: str) -> List[Dict[str, Any]]:
    if status == "ALL":
        return list(consultations)
    return [c for c in consultations if c.get("status") == status]


def sorted_messages(consultation: Dict[str, Any]) -> List[Dict[str, Any]]:
    return sorted(consultation.get("messages") or [], key=lambda m: str(m.get("createdAt") or ""))


@dataclass
class ConsultationsService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.consultations = ConsultationsRepo(self.api)

    def list_consultations(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        status = None if status in (None, "", "ALL") else status

        def _load() -> List[Dict[str, Any]]:
            try:
                return list(self.consultations.page(status).get("consultations") or [])
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise

        return self.cache.fetch(("consultations", "list", status), _load)

    def get_consultation(self, consultation_id: str) -> Optional[Dict[str, Any]]:
        def _load() -> Optional[Dict[str, Any]]:
            try:
                return self.consultations.get(consultation_id)
            except ApiError as exc:
                if exc.is_not_found:
                    return None
                raise

        return self.cache.fetch(("consultations", "detail", str(consultation_id)), _load)

    def send_message(self, consultation_id: str, content: str) -> Any:
        text = (content or "").strip()
        if not text:
            raise ValueError("Message content is required")
        sent = self.consultations.send_message(consultation_id, text)
        self.cache.invalidate(("consultations",))
        return sent

    def resolve(self, consultation_id: str) -> Any:
        result = self.consultations.resolve(consultation_id)
        self.cache.invalidate(("consultations",))
        return result

    def counts(self) -> Dict[str, int]:
        return count_by_status(self.list_consultations())
