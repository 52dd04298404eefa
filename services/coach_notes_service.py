"""Private trainer notes attached to a client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import CoachNotesRepo
from services.query_cache import QueryCache


def _require_content(content: str) -> str:
    text = (content or "").strip()
    if not text:
        raise ValueError("Note content is required")
    return text


@dataclass
class CoachNotesService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.notes = CoachNotesRepo(self.api)

    def list_notes(self, client_id: str) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                notes = self.notes.list(clientId=client_id)
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise
            return sorted(notes, key=lambda n: str(n.get("createdAt") or ""), reverse=True)

        return self.cache.fetch(("coach-notes", str(client_id)), _load)

    def create_note(self, client_id: str, content: str) -> Any:
        created = self.notes.create({"clientId": client_id, "content": _require_content(content)})
        self.cache.invalidate(("coach-notes", str(client_id)))
        return created

    def update_note(self, client_id: str, note_id: str, content: str) -> Any:
        updated = self.notes.update(note_id, {"content": _require_content(content)})
        self.cache.invalidate(("coach-notes", str(client_id)))
        return updated

    def delete_note(self, client_id: str, note_id: str) -> None:
        self.notes.delete(note_id)
        self.cache.invalidate(("coach-notes", str(client_id)))
