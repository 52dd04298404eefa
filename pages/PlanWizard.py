from __future__ import annotations

import streamlit as st

from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.exercises_service import ExercisesService
from services.plan_wizard import PlanWizard, WizardStep
from services.training_plans_service import TrainingPlansService
from ui.plan_wizard_steps import (
    render_exercises_step,
    render_info_step,
    render_progress,
    render_review_step,
    render_structure_step,
)
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, show_flash, sidebar_account

WIZARD = "plan_wizard"
CONFIRM_CANCEL = "plan_wizard_confirm_cancel"
WIDGET_PREFIXES = (
    "wizard_",
    "day-name-",
    "search-",
    "pick-",
    "sets-",
    "reps-",
    "rir-",
    "rest-",
    "customDescription-",
    "customVideoUrl-",
    "customImageUrl-",
    "coachNotes-",
)


def _discard_draft() -> None:
    """Drop the draft and every widget value that mirrors it."""
    wizard = st.session_state.pop(WIZARD, None)
    if wizard is not None:
        wizard.reset()
    for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_PREFIXES)]:
        del st.session_state[key]
    st.session_state.pop(CONFIRM_CANCEL, None)


cfg = page_header("wizard.title", "📋")
require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

api = get_api_client(cfg)
cache = get_query_cache(cfg)
plans_service = TrainingPlansService(api, cache)
exercises_service = ExercisesService(api, cache)

if WIZARD not in st.session_state:
    st.session_state[WIZARD] = PlanWizard()
wizard: PlanWizard = st.session_state[WIZARD]

col_title, col_cancel = st.columns([4, 1])
col_title.title(t("wizard.title"))
if col_cancel.button(t("wizard.cancel"), key="wizard-cancel"):
    st.session_state[CONFIRM_CANCEL] = True

if st.session_state.get(CONFIRM_CANCEL):
    st.warning(t("wizard.confirm_cancel"))
    col_yes, col_no = st.columns(2)
    if col_yes.button(t("wizard.discard"), type="primary", key="wizard-cancel-yes"):
        _discard_draft()
        st.switch_page("pages/TrainingPlans.py")
    if col_no.button(t("wizard.keep_editing"), key="wizard-cancel-no"):
        st.session_state.pop(CONFIRM_CANCEL, None)
        st.rerun()

render_progress(wizard)
st.divider()

if wizard.step == WizardStep.INFO:
    render_info_step(wizard)
elif wizard.step == WizardStep.STRUCTURE:
    render_structure_step(wizard)
elif wizard.step == WizardStep.EXERCISES:
    render_exercises_step(wizard, exercises_service)
elif render_review_step(wizard, plans_service):
    _discard_draft()
    st.switch_page("pages/TrainingPlans.py")
