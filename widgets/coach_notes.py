"""Coach notes section on the client page."""

from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from persistence.api_client import ApiError
from services.coach_notes_service import CoachNotesService
from services.presenters import display_name
from utils.formatting import fmt_datetime
from utils.i18n import t
from utils.time import parse_api_datetime, to_local
from utils.ui_helpers import report_error, toast_error

EDITING_NOTE = "coach_note_editing"


def _note_header(note: Dict[str, Any]) -> str:
    author = display_name(note.get("author")) or t("notes.author_trainer")
    created = to_local(parse_api_datetime(note.get("createdAt")))
    when = fmt_datetime(created, "short") if created else ""
    return f"**{author}** · {when}"


def render_coach_notes(client_id: str, service: CoachNotesService, current_user_id: Optional[str]) -> None:
    st.subheader(t("notes.title"))
    with st.form(f"new_note_{client_id}", clear_on_submit=True):
        content = st.text_area(t("notes.placeholder"), label_visibility="collapsed", placeholder=t("notes.placeholder"))
        if st.form_submit_button(t("notes.add")):
            if not content.strip():
                st.warning(t("notes.empty_content"))
            else:
                try:
                    service.create_note(client_id, content)
                except ApiError as exc:
                    report_error(exc, "notes.error")
                else:
                    st.rerun()

    try:
        notes = service.list_notes(client_id)
    except ApiError as exc:
        report_error(exc)
        return
    if not notes:
        st.caption(t("notes.empty"))
        return

    editing = st.session_state.get(EDITING_NOTE)
    for note in notes:
        note_id = str(note.get("id"))
        own = current_user_id is not None and str(note.get("authorId")) == str(current_user_id)
        with st.container(border=True):
            st.markdown(_note_header(note))
            if editing == note_id:
                new_content = st.text_area(
                    t("notes.edit"), value=note.get("content") or "", key=f"edit-note-{note_id}"
                )
                col_save, col_cancel = st.columns(2)
                if col_save.button(t("common.save"), key=f"save-note-{note_id}"):
                    if not new_content.strip():
                        st.warning(t("notes.empty_content"))
                    else:
                        try:
                            service.update_note(client_id, note_id, new_content)
                        except ApiError as exc:
                            toast_error(exc)
                        else:
                            st.session_state.pop(EDITING_NOTE, None)
                            st.rerun()
                if col_cancel.button(t("common.cancel"), key=f"cancel-note-{note_id}"):
                    st.session_state.pop(EDITING_NOTE, None)
                    st.rerun()
                continue
            st.write(note.get("content") or "")
            if own:
                col_edit, col_delete = st.columns(2)
                if col_edit.button(t("notes.edit"), key=f"edit-btn-{note_id}"):
                    st.session_state[EDITING_NOTE] = note_id
                    st.rerun()
                if col_delete.button(t("common.delete"), key=f"delete-note-{note_id}"):
                    try:
                        service.delete_note(client_id, note_id)
                    except ApiError as exc:
                        toast_error(exc)
                    else:
                        st.rerun()
