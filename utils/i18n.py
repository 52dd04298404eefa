"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

UI translations.

Keys are dotted paths (``"calendar.modal.title"``). Lookups go to the active
language first, then English, then the key itself so a missing translation
never breaks a page.
"""

from __future__ import annotations

import logging
from typing import Dict

from utils import formatting

LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "es"
SUPPORTED = ["es", "en"]

_MUSCLE_GROUPS_EN = {
    "PECTORAL": "Chest",
    "DORSAL": "Back",
    "PIERNA": "Legs",
    "HOMBRO": "Shoulders",
    "BICEPS": "Biceps",
    "TRICEPS": "Triceps",
    "ABDOMINALES": "Abs",
    "LUMBAR": "Lower back",
    "CARDIO": "Cardio",
    "MOVILIDAD": "Mobility",
    "CALENTAMIENTO": "Warm-up",
    "CUADRICEPS": "Quadriceps",
    "FEMORAL": "Hamstrings",
    "GLUTEO": "Glutes",
    "GEMELO": "Calves",
    "DELTOIDES": "Deltoids",
}

_MUSCLE_GROUPS_ES = {
    "PECTORAL": "Pectoral",
    "DORSAL": "Dorsal",
    "PIERNA": "Pierna",
    "HOMBRO": "Hombro",
    "BICEPS": "Bíceps",
    "TRICEPS": "Tríceps",
    "ABDOMINALES": "Abdominales",
    "LUMBAR": "Lumbar",
    "CARDIO": "Cardio",
    "MOVILIDAD": "Movilidad",
    "CALENTAMIENTO": "Calentamiento",
    "CUADRICEPS": "Cuádriceps",
    "FEMORAL": "Femoral",
    "GLUTEO": "Glúteo",
    "GEMELO": "Gemelo",
    "DELTOIDES": "Deltoides",
}

EN: Dict[str, str] = {
    # Common
    "common.error": "Something went wrong. Please try again.",
    "common.save": "Save",
    "common.cancel": "Cancel",
    "common.delete": "Delete",
    "common.confirm_delete": "This cannot be undone. Delete it?",
    # Auth / navigation
    "auth.session_expired": "Your session has expired. Please sign in again.",
    "auth.forbidden": "You do not have access to that page.",
    "nav.signed_in_as": "Signed in as {name}",
    "nav.logout": "Log out",
    "nav.dashboard": "Dashboard",
    "nav.clients": "Clients",
    "nav.exercises": "Exercises",
    "nav.plans": "Training plans",
    "nav.calendar": "Calendar",
    "nav.inbox": "Inbox",
    "nav.settings": "Settings",
    "nav.admin": "Trainers",
    "nav.my_plan": "My plan",
    "nav.my_progress": "My progress",
    "login.title": "Trainer Console",
    "login.subtitle": "Sign in to manage your clients and their training.",
    "login.submit": "Sign in",
    "login.forgot": "Forgot your password?",
    "login.error": "Invalid email or password.",
    "home.title": "Welcome, {name}",
    # Password recovery
    "password.title": "Password recovery",
    "password.back_to_login": "Back to sign in",
    "password.forgot_title": "Forgot your password?",
    "password.forgot_help": "Enter your email and we will send you a link to reset it.",
    "password.forgot_submit": "Send reset link",
    "password.forgot_sent": "If {email} has an account, a reset link is on its way.",
    "password.forgot_error": "The reset link could not be sent.",
    "password.reset_title": "Choose a new password",
    "password.reset_submit": "Reset password",
    "password.reset_error": "The password could not be reset. The link may have expired.",
    "password.reset_done": "Your password was reset. You can sign in now.",
    # Form fields
    "fields.email": "Email",
    "fields.password": "Password",
    "fields.confirmPassword": "Confirm password",
    "fields.oldPassword": "Current password",
    "fields.newPassword": "New password",
    "fields.name": "Name",
    "fields.avatarUrl": "Avatar",
    "fields.birthDate": "Birth date",
    "fields.gender": "Gender",
    "fields.height": "Height (cm)",
    "fields.weight": "Weight (kg)",
    "fields.leanMass": "Lean mass (kg)",
    "fields.maxHeartRate": "Max heart rate",
    "fields.restingHeartRate": "Resting heart rate",
    "fields.clientId": "Client",
    "fields.planId": "Plan",
    "fields.trainingDayId": "Training day",
    "fields.date": "Date",
    "fields.time": "Time",
    "fields.notes": "Notes",
    "fields.muscleGroup": "Muscle group",
    "fields.description": "Description",
    "fields.defaultVideoUrl": "Video URL",
    "fields.defaultImageUrl": "Image URL",
    "fields.coachNotes": "Coach notes",
    "fields.bodyFat": "Body fat (%)",
    "fields.waist": "Waist (cm)",
    "fields.hips": "Hips (cm)",
    "fields.chest": "Chest (cm)",
    "fields.arm": "Arm (cm)",
    "fields.leg": "Leg (cm)",
    # Validation
    "validation.email": "Enter a valid email address",
    "validation.password_min_6": "Must be at least 6 characters",
    "validation.password_min_8": "Must be at least 8 characters",
    "validation.passwords_mismatch": "Passwords do not match",
    "validation.name_min_2": "Must be at least 2 characters",
    "validation.required": "Required",
    "validation.number": "Must be a number",
    "validation.non_negative": "Must be zero or more",
    "validation.url": "Must be an http(s) URL",
    "validation.date": "Enter a valid date",
    "validation.gender": "Choose a valid option",
    # Dashboard
    "dashboard.welcome": "Hello, {name}",
    "dashboard.trainer_subtitle": "Here is how your training business looks today.",
    "dashboard.client_subtitle": "Here is your training at a glance.",
    "dashboard.error": "The dashboard could not be loaded",
    "dashboard.stats.total_clients": "Clients",
    "dashboard.stats.clients_desc": "Active clients you coach",
    "dashboard.stats.total_exercises": "Exercises",
    "dashboard.stats.exercises_desc": "Exercises in your library",
    "dashboard.stats.total_plans": "Training plans",
    "dashboard.stats.plans_desc": "Plans you have designed",
    "dashboard.stats.sessions_today": "Sessions today",
    "dashboard.stats.sessions_today_desc": "Workouts scheduled for today",
    "dashboard.stats.sessions_month": "Sessions this month",
    "dashboard.stats.sessions_month_desc": "Workouts completed this month",
    "dashboard.active_plan.title": "Active plan",
    "dashboard.active_plan.no_plan": "No plan assigned yet.",
    "dashboard.next_session.title": "Next session",
    "dashboard.next_session.scheduled_for": "Scheduled for {date}",
    "dashboard.next_session.none": "No upcoming sessions.",
    "dashboard.quick_actions.title": "Quick actions",
    "dashboard.quick_actions.new_client": "New client",
    "dashboard.quick_actions.new_client_desc": "Register a client and send their access.",
    "dashboard.quick_actions.new_exercise": "New exercise",
    "dashboard.quick_actions.new_exercise_desc": "Grow your exercise library.",
    "dashboard.quick_actions.new_plan": "New plan",
    "dashboard.quick_actions.new_plan_desc": "Design a plan step by step.",
    "dashboard.quick_actions.view_calendar": "Calendar",
    "dashboard.quick_actions.view_calendar_desc": "Schedule and review sessions.",
    # Clients
    "clients.title": "Clients",
    "clients.detail_title": "Client",
    "clients.search": "Search",
    "clients.search_placeholder": "Name or email",
    "clients.count": "{count} clients",
    "clients.view": "Open",
    "clients.back": "Back to clients",
    "clients.pick_first": "Choose a client from the list first.",
    "clients.not_found": "Client not found.",
    "clients.no_plan": "No plan",
    "clients.empty": "No clients yet.",
    "clients.none_with_plan": "None of your clients has an active plan.",
    "clients.unnamed": "Unnamed",
    "clients.delete": "Delete client",
    "clients.confirm_delete": "Delete {name} and all their data?",
    "clients.delete_error": "The client could not be deleted",
    "clients.deleted": "{name} was deleted.",
    "clients.tabs.profile": "Profile",
    "clients.tabs.plan": "Plan",
    "clients.tabs.metrics": "Body metrics",
    "clients.tabs.photos": "Progress photos",
    "clients.tabs.notes": "Notes",
    "clients.new.title": "New client",
    "clients.new.submit": "Create client",
    "clients.new.error": "The client could not be created",
    "clients.new.success": "{name} was added to your clients.",
    "clients.assign.title": "Assign plan",
    "clients.assign.none": "No plan",
    "clients.assign.submit": "Assign",
    "clients.assign.error": "The plan could not be assigned",
    "clients.assign.success": "Plan updated.",
    # Profile
    "profile.birth_date": "Birth date",
    "profile.gender": "Gender",
    "profile.genders.male": "Male",
    "profile.genders.female": "Female",
    "profile.genders.other": "Other",
    "profile.height": "Height",
    "profile.weight": "Weight",
    "profile.lean_mass": "Lean mass",
    "profile.max_hr": "Max heart rate",
    "profile.resting_hr": "Resting heart rate",
    "profile.empty": "No profile data yet.",
    "profile.edit_title": "Edit profile",
    "profile.error": "The profile could not be saved",
    "profile.saved": "Profile saved.",
    # Exercises
    "exercises.title": "Exercise library",
    "exercises.search": "Search",
    "exercises.search_placeholder": "Name or muscle group",
    "exercises.create": "New exercise",
    "exercises.edit": "Edit",
    "exercises.video": "Video",
    "exercises.error": "The exercise could not be saved",
    "exercises.created": "{name} was created.",
    "exercises.updated": "{name} was updated.",
    "exercises.deleted": "{name} was deleted.",
    "exercises.empty": "Your library is empty.",
    "exercises.no_results": "No exercises match your search.",
    "exercises.ungrouped": "Other",
    # Training plans
    "plans.title": "Training plans",
    "plans.new": "New plan",
    "plans.view": "Open",
    "plans.back": "Back to plans",
    "plans.empty": "No training plans yet.",
    "plans.not_found": "Plan not found.",
    "plans.summary": "{days} days · {exercises} exercises",
    "plans.rest": "Rest {rest}",
    "plans.weight": "Weight (kg)",
    "plans.new_day": "New day name",
    "plans.day_added": "Day added.",
    "plans.exercise_added": "Exercise added.",
    "plans.error": "The plan could not be updated",
    "plans.confirm_delete": "Delete {name}? Clients using it lose their plan.",
    "plans.deleted": "{name} was deleted.",
    "plans.no_days": "This plan has no days yet.",
    "my_plan.no_plan": "Your trainer has not assigned you a plan yet.",
    "my_plan.subtitle": "The plan your trainer prepared for you, day by day.",
    "my_progress.subtitle": "Log your measurements and follow your progress.",
    # Plan wizard
    "wizard.title": "New training plan",
    "wizard.cancel": "Cancel",
    "wizard.confirm_cancel": "Discard this plan? Your changes will be lost.",
    "wizard.discard": "Discard",
    "wizard.keep_editing": "Keep editing",
    "wizard.steps.info": "Information",
    "wizard.steps.structure": "Structure",
    "wizard.steps.exercises": "Exercises",
    "wizard.steps.review": "Review",
    "wizard.back": "Back",
    "wizard.next": "Next",
    "wizard.review_button": "Review",
    "wizard.info.title": "Plan information",
    "wizard.info.name_hint": "The name needs at least 4 characters.",
    "wizard.structure.title": "Training days",
    "wizard.structure.empty": "Add at least one day to continue.",
    "wizard.structure.add_day": "Add day",
    "wizard.structure.day_label": "Day {order}",
    "wizard.exercises.title": "Exercises per day",
    "wizard.exercises.sets": "Sets",
    "wizard.exercises.reps": "Reps",
    "wizard.exercises.rest": "Rest (s)",
    "wizard.exercises.custom": "Customise",
    "wizard.exercises.search": "Search exercises",
    "wizard.exercises.pick": "Exercise",
    "wizard.exercises.add_exercise_button": "Add exercise",
    "wizard.exercises.empty": "No exercises yet.",
    "wizard.review.title": "Review",
    "wizard.review.total_days": "Days",
    "wizard.review.total_exercises": "Exercises",
    "wizard.review.create": "Create plan",
    "wizard.review.error": "The plan could not be created.",
    "wizard.review.success": "{name} was created.",
    # Calendar
    "calendar.title": "Calendar",
    "calendar.session": "Session",
    "calendar.more": "+{count} more",
    "calendar.schedule": "Schedule session",
    "calendar.previous": "Previous month",
    "calendar.next": "Next month",
    "calendar.today": "Today",
    "calendar.upcoming": "Upcoming",
    "calendar.no_upcoming": "Nothing scheduled.",
    "calendar.status.scheduled": "Scheduled",
    "calendar.status.completed": "Completed",
    "calendar.status.missed": "Missed",
    "calendar.modal.title": "Schedule session",
    "calendar.modal.submit": "Schedule",
    "calendar.modal.success": "Session scheduled.",
    "calendar.modal.error": "The session could not be scheduled",
    "calendar.modal.no_plan": "No active plan",
    "calendar.modal.plan_without_days": "This plan has no training days.",
    "calendar.modal.clients_without_plan": "{count} clients without an active plan are hidden.",
    "calendar.details.title": "Session details",
    "calendar.details.reschedule": "Reschedule",
    "calendar.details.save": "Save new date",
    "calendar.details.error": "The session could not be updated",
    "calendar.details.rescheduled": "Session rescheduled.",
    "calendar.details.confirm_cancel": "Yes, cancel this session",
    "calendar.details.cancel": "Cancel session",
    "calendar.details.cancelled": "Session cancelled.",
    # Body metrics / photos / notes
    "metrics.chart_title": "Weight over time",
    "metrics.columns.date": "Date",
    "metrics.columns.weight": "Weight",
    "metrics.columns.body_fat": "Body fat",
    "metrics.columns.waist": "Waist",
    "metrics.columns.hips": "Hips",
    "metrics.columns.chest": "Chest",
    "metrics.columns.arm": "Arm",
    "metrics.columns.leg": "Leg",
    "metrics.columns.notes": "Notes",
    "metrics.log": "Log measurement",
    "metrics.log_title": "New measurement",
    "metrics.error": "The measurement could not be saved",
    "metrics.logged": "Measurement saved.",
    "metrics.current_weight": "Current weight",
    "metrics.entries": "Entries",
    "metrics.last_logged": "Last logged",
    "metrics.empty": "No measurements yet.",
    "photos.url": "Image URL",
    "photos.caption": "Caption",
    "photos.add": "Add photo",
    "photos.url_required": "An image URL is required.",
    "photos.error": "The photo could not be saved",
    "photos.added": "Photo added.",
    "photos.empty": "No progress photos yet.",
    "notes.title": "Coach notes",
    "notes.author_trainer": "Trainer",
    "notes.placeholder": "Write a private note about this client...",
    "notes.add": "Add note",
    "notes.edit": "Edit",
    "notes.empty_content": "A note cannot be empty.",
    "notes.error": "The note could not be saved",
    "notes.empty": "No notes yet.",
    # Inbox
    "inbox.title": "Inbox",
    "inbox.thread_title": "Consultation",
    "inbox.filter": "Show",
    "inbox.filters.all": "All",
    "inbox.filters.open": "Open",
    "inbox.filters.resolved": "Resolved",
    "inbox.empty": "No consultations here.",
    "inbox.open": "Open",
    "inbox.back": "Back to inbox",
    "inbox.pick_first": "Choose a consultation from the inbox first.",
    "inbox.not_found": "Consultation not found.",
    "inbox.no_subject": "(no subject)",
    "inbox.no_messages": "No messages yet.",
    "inbox.status.open": "Open",
    "inbox.status.resolved": "Resolved",
    "inbox.priority.high": "High",
    "inbox.priority.medium": "Medium",
    "inbox.priority.low": "Low",
    "inbox.you": "You",
    "inbox.client": "Client",
    "inbox.resolve": "Mark as resolved",
    "inbox.resolved": "Consultation resolved.",
    "inbox.closed": "This consultation is resolved.",
    "inbox.reply_placeholder": "Write a reply...",
    "inbox.empty_message": "The message is empty.",
    "inbox.error": "The consultation could not be updated",
    # Settings
    "settings.title": "Settings",
    "settings.language": "Language",
    "settings.profile": "Profile",
    "settings.profile_saved": "Profile updated.",
    "settings.change_password": "Change password",
    "settings.password_changed": "Password changed.",
    "settings.error": "The change could not be saved",
    # Admin
    "admin.title": "Trainers",
    "admin.create_title": "New trainer",
    "admin.create": "Create trainer",
    "admin.created": "{name} can now sign in.",
    "admin.empty": "No trainers yet.",
    "admin.reset_password": "Reset password",
    "admin.password_reset": "Password reset for {name}.",
    "admin.confirm_delete": "Delete {name} and their clients?",
    "admin.deleted": "{name} was deleted.",
    "admin.error": "The trainer could not be updated",
}
EN.update({f"exercises.muscle_groups.{k}": v for k, v in _MUSCLE_GROUPS_EN.items()})

ES: Dict[str, str] = {
    "common.error": "Algo salió mal. Inténtalo de nuevo.",
    "common.save": "Guardar",
    "common.cancel": "Cancelar",
    "common.delete": "Eliminar",
    "common.confirm_delete": "Esta acción no se puede deshacer. ¿Eliminar?",
    "auth.session_expired": "Tu sesión ha caducado. Vuelve a iniciar sesión.",
    "auth.forbidden": "No tienes acceso a esa página.",
    "nav.signed_in_as": "Sesión iniciada como {name}",
    "nav.logout": "Cerrar sesión",
    "nav.dashboard": "Panel",
    "nav.clients": "Clientes",
    "nav.exercises": "Ejercicios",
    "nav.plans": "Planes de entrenamiento",
    "nav.calendar": "Calendario",
    "nav.inbox": "Consultas",
    "nav.settings": "Ajustes",
    "nav.admin": "Entrenadores",
    "nav.my_plan": "Mi plan",
    "nav.my_progress": "Mi progreso",
    "login.title": "Consola del entrenador",
    "login.subtitle": "Inicia sesión para gestionar a tus clientes y su entrenamiento.",
    "login.submit": "Iniciar sesión",
    "login.forgot": "¿Olvidaste tu contraseña?",
    "login.error": "Email o contraseña incorrectos.",
    "home.title": "Bienvenido, {name}",
    "password.title": "Recuperar contraseña",
    "password.back_to_login": "Volver a iniciar sesión",
    "password.forgot_title": "¿Olvidaste tu contraseña?",
    "password.forgot_help": "Introduce tu email y te enviaremos un enlace para restablecerla.",
    "password.forgot_submit": "Enviar enlace",
    "password.forgot_sent": "Si {email} tiene cuenta, recibirá un enlace en breve.",
    "password.forgot_error": "No se pudo enviar el enlace.",
    "password.reset_title": "Elige una nueva contraseña",
    "password.reset_submit": "Restablecer contraseña",
    "password.reset_error": "No se pudo restablecer la contraseña. El enlace puede haber caducado.",
    "password.reset_done": "Contraseña restablecida. Ya puedes iniciar sesión.",
    "fields.email": "Email",
    "fields.password": "Contraseña",
    "fields.confirmPassword": "Confirmar contraseña",
    "fields.oldPassword": "Contraseña actual",
    "fields.newPassword": "Nueva contraseña",
    "fields.name": "Nombre",
    "fields.avatarUrl": "Avatar",
    "fields.birthDate": "Fecha de nacimiento",
    "fields.gender": "Género",
    "fields.height": "Altura (cm)",
    "fields.weight": "Peso (kg)",
    "fields.leanMass": "Masa magra (kg)",
    "fields.maxHeartRate": "Frecuencia cardiaca máxima",
    "fields.restingHeartRate": "Frecuencia cardiaca en reposo",
    "fields.clientId": "Cliente",
    "fields.planId": "Plan",
    "fields.trainingDayId": "Día de entrenamiento",
    "fields.date": "Fecha",
    "fields.time": "Hora",
    "fields.notes": "Notas",
    "fields.muscleGroup": "Grupo muscular",
    "fields.description": "Descripción",
    "fields.defaultVideoUrl": "URL del vídeo",
    "fields.defaultImageUrl": "URL de la imagen",
    "fields.coachNotes": "Notas del entrenador",
    "fields.bodyFat": "Grasa corporal (%)",
    "fields.waist": "Cintura (cm)",
    "fields.hips": "Cadera (cm)",
    "fields.chest": "Pecho (cm)",
    "fields.arm": "Brazo (cm)",
    "fields.leg": "Pierna (cm)",
    "validation.email": "Introduce un email válido",
    "validation.password_min_6": "Debe tener al menos 6 caracteres",
    "validation.password_min_8": "Debe tener al menos 8 caracteres",
    "validation.passwords_mismatch": "Las contraseñas no coinciden",
    "validation.name_min_2": "Debe tener al menos 2 caracteres",
    "validation.required": "Obligatorio",
    "validation.number": "Debe ser un número",
    "validation.non_negative": "Debe ser cero o mayor",
    "validation.url": "Debe ser una URL http(s)",
    "validation.date": "Introduce una fecha válida",
    "validation.gender": "Elige una opción válida",
    "dashboard.welcome": "Hola, {name}",
    "dashboard.trainer_subtitle": "Así va tu actividad como entrenador hoy.",
    "dashboard.client_subtitle": "Tu entrenamiento de un vistazo.",
    "dashboard.error": "No se pudo cargar el panel",
    "dashboard.stats.total_clients": "Clientes",
    "dashboard.stats.clients_desc": "Clientes activos que entrenas",
    "dashboard.stats.total_exercises": "Ejercicios",
    "dashboard.stats.exercises_desc": "Ejercicios en tu biblioteca",
    "dashboard.stats.total_plans": "Planes",
    "dashboard.stats.plans_desc": "Planes que has diseñado",
    "dashboard.stats.sessions_today": "Sesiones hoy",
    "dashboard.stats.sessions_today_desc": "Entrenamientos programados para hoy",
    "dashboard.stats.sessions_month": "Sesiones este mes",
    "dashboard.stats.sessions_month_desc": "Entrenamientos completados este mes",
    "dashboard.active_plan.title": "Plan activo",
    "dashboard.active_plan.no_plan": "Aún no tienes un plan asignado.",
    "dashboard.next_session.title": "Próxima sesión",
    "dashboard.next_session.scheduled_for": "Programada para {date}",
    "dashboard.next_session.none": "No hay sesiones próximas.",
    "dashboard.quick_actions.title": "Acciones rápidas",
    "dashboard.quick_actions.new_client": "Nuevo cliente",
    "dashboard.quick_actions.new_client_desc": "Registra un cliente y envíale su acceso.",
    "dashboard.quick_actions.new_exercise": "Nuevo ejercicio",
    "dashboard.quick_actions.new_exercise_desc": "Amplía tu biblioteca de ejercicios.",
    "dashboard.quick_actions.new_plan": "Nuevo plan",
    "dashboard.quick_actions.new_plan_desc": "Diseña un plan paso a paso.",
    "dashboard.quick_actions.view_calendar": "Calendario",
    "dashboard.quick_actions.view_calendar_desc": "Programa y revisa sesiones.",
    "clients.title": "Clientes",
    "clients.detail_title": "Cliente",
    "clients.search": "Buscar",
    "clients.search_placeholder": "Nombre o email",
    "clients.count": "{count} clientes",
    "clients.view": "Abrir",
    "clients.back": "Volver a clientes",
    "clients.pick_first": "Elige primero un cliente de la lista.",
    "clients.not_found": "Cliente no encontrado.",
    "clients.no_plan": "Sin plan",
    "clients.empty": "Aún no tienes clientes.",
    "clients.none_with_plan": "Ninguno de tus clientes tiene un plan activo.",
    "clients.unnamed": "Sin nombre",
    "clients.delete": "Eliminar cliente",
    "clients.confirm_delete": "¿Eliminar a {name} y todos sus datos?",
    "clients.delete_error": "No se pudo eliminar el cliente",
    "clients.deleted": "{name} ha sido eliminado.",
    "clients.tabs.profile": "Perfil",
    "clients.tabs.plan": "Plan",
    "clients.tabs.metrics": "Medidas corporales",
    "clients.tabs.photos": "Fotos de progreso",
    "clients.tabs.notes": "Notas",
    "clients.new.title": "Nuevo cliente",
    "clients.new.submit": "Crear cliente",
    "clients.new.error": "No se pudo crear el cliente",
    "clients.new.success": "{name} se ha añadido a tus clientes.",
    "clients.assign.title": "Asignar plan",
    "clients.assign.none": "Sin plan",
    "clients.assign.submit": "Asignar",
    "clients.assign.error": "No se pudo asignar el plan",
    "clients.assign.success": "Plan actualizado.",
    "profile.birth_date": "Fecha de nacimiento",
    "profile.gender": "Género",
    "profile.genders.male": "Hombre",
    "profile.genders.female": "Mujer",
    "profile.genders.other": "Otro",
    "profile.height": "Altura",
    "profile.weight": "Peso",
    "profile.lean_mass": "Masa magra",
    "profile.max_hr": "FC máxima",
    "profile.resting_hr": "FC en reposo",
    "profile.empty": "Aún no hay datos de perfil.",
    "profile.edit_title": "Editar perfil",
    "profile.error": "No se pudo guardar el perfil",
    "profile.saved": "Perfil guardado.",
    "exercises.title": "Biblioteca de ejercicios",
    "exercises.search": "Buscar",
    "exercises.search_placeholder": "Nombre o grupo muscular",
    "exercises.create": "Nuevo ejercicio",
    "exercises.edit": "Editar",
    "exercises.video": "Vídeo",
    "exercises.error": "No se pudo guardar el ejercicio",
    "exercises.created": "{name} se ha creado.",
    "exercises.updated": "{name} se ha actualizado.",
    "exercises.deleted": "{name} se ha eliminado.",
    "exercises.empty": "Tu biblioteca está vacía.",
    "exercises.no_results": "Ningún ejercicio coincide con la búsqueda.",
    "exercises.ungrouped": "Otros",
    "plans.title": "Planes de entrenamiento",
    "plans.new": "Nuevo plan",
    "plans.view": "Abrir",
    "plans.back": "Volver a planes",
    "plans.empty": "Aún no hay planes de entrenamiento.",
    "plans.not_found": "Plan no encontrado.",
    "plans.summary": "{days} días · {exercises} ejercicios",
    "plans.rest": "Descanso {rest}",
    "plans.weight": "Peso (kg)",
    "plans.new_day": "Nombre del nuevo día",
    "plans.day_added": "Día añadido.",
    "plans.exercise_added": "Ejercicio añadido.",
    "plans.error": "No se pudo actualizar el plan",
    "plans.confirm_delete": "¿Eliminar {name}? Los clientes que lo usan se quedarán sin plan.",
    "plans.deleted": "{name} se ha eliminado.",
    "plans.no_days": "Este plan aún no tiene días.",
    "my_plan.no_plan": "Tu entrenador aún no te ha asignado un plan.",
    "my_plan.subtitle": "El plan que tu entrenador ha preparado para ti, día a día.",
    "my_progress.subtitle": "Registra tus medidas y sigue tu progreso.",
    "wizard.title": "Nuevo plan de entrenamiento",
    "wizard.cancel": "Cancelar",
    "wizard.confirm_cancel": "¿Descartar este plan? Perderás los cambios.",
    "wizard.discard": "Descartar",
    "wizard.keep_editing": "Seguir editando",
    "wizard.steps.info": "Información",
    "wizard.steps.structure": "Estructura",
    "wizard.steps.exercises": "Ejercicios",
    "wizard.steps.review": "Revisión",
    "wizard.back": "Atrás",
    "wizard.next": "Siguiente",
    "wizard.review_button": "Revisar",
    "wizard.info.title": "Información del plan",
    "wizard.info.name_hint": "El nombre necesita al menos 4 caracteres.",
    "wizard.structure.title": "Días de entrenamiento",
    "wizard.structure.empty": "Añade al menos un día para continuar.",
    "wizard.structure.add_day": "Añadir día",
    "wizard.structure.day_label": "Día {order}",
    "wizard.exercises.title": "Ejercicios por día",
    "wizard.exercises.sets": "Series",
    "wizard.exercises.reps": "Repeticiones",
    "wizard.exercises.rest": "Descanso (s)",
    "wizard.exercises.custom": "Personalizar",
    "wizard.exercises.search": "Buscar ejercicios",
    "wizard.exercises.pick": "Ejercicio",
    "wizard.exercises.add_exercise_button": "Añadir ejercicio",
    "wizard.exercises.empty": "Aún no hay ejercicios.",
    "wizard.review.title": "Revisión",
    "wizard.review.total_days": "Días",
    "wizard.review.total_exercises": "Ejercicios",
    "wizard.review.create": "Crear plan",
    "wizard.review.error": "No se pudo crear el plan.",
    "wizard.review.success": "{name} se ha creado.",
    "calendar.title": "Calendario",
    "calendar.session": "Sesión",
    "calendar.more": "+{count} más",
    "calendar.schedule": "Programar sesión",
    "calendar.previous": "Mes anterior",
    "calendar.next": "Mes siguiente",
    "calendar.today": "Hoy",
    "calendar.upcoming": "Próximas",
    "calendar.no_upcoming": "Nada programado.",
    "calendar.status.scheduled": "Programada",
    "calendar.status.completed": "Completada",
    "calendar.status.missed": "Perdida",
    "calendar.modal.title": "Programar sesión",
    "calendar.modal.submit": "Programar",
    "calendar.modal.success": "Sesión programada.",
    "calendar.modal.error": "No se pudo programar la sesión",
    "calendar.modal.no_plan": "Sin plan activo",
    "calendar.modal.plan_without_days": "Este plan no tiene días de entrenamiento.",
    "calendar.modal.clients_without_plan": "Se ocultan {count} clientes sin plan activo.",
    "calendar.details.title": "Detalles de la sesión",
    "calendar.details.reschedule": "Reprogramar",
    "calendar.details.save": "Guardar nueva fecha",
    "calendar.details.error": "No se pudo actualizar la sesión",
    "calendar.details.rescheduled": "Sesión reprogramada.",
    "calendar.details.confirm_cancel": "Sí, cancelar esta sesión",
    "calendar.details.cancel": "Cancelar sesión",
    "calendar.details.cancelled": "Sesión cancelada.",
    "metrics.chart_title": "Evolución del peso",
    "metrics.columns.date": "Fecha",
    "metrics.columns.weight": "Peso",
    "metrics.columns.body_fat": "Grasa corporal",
    "metrics.columns.waist": "Cintura",
    "metrics.columns.hips": "Cadera",
    "metrics.columns.chest": "Pecho",
    "metrics.columns.arm": "Brazo",
    "metrics.columns.leg": "Pierna",
    "metrics.columns.notes": "Notas",
    "metrics.log": "Registrar medida",
    "metrics.log_title": "Nueva medida",
    "metrics.error": "No se pudo guardar la medida",
    "metrics.logged": "Medida guardada.",
    "metrics.current_weight": "Peso actual",
    "metrics.entries": "Registros",
    "metrics.last_logged": "Último registro",
    "metrics.empty": "Aún no hay medidas.",
    "photos.url": "URL de la imagen",
    "photos.caption": "Descripción",
    "photos.add": "Añadir foto",
    "photos.url_required": "La URL de la imagen es obligatoria.",
    "photos.error": "No se pudo guardar la foto",
    "photos.added": "Foto añadida.",
    "photos.empty": "Aún no hay fotos de progreso.",
    "notes.title": "Notas del entrenador",
    "notes.author_trainer": "Entrenador",
    "notes.placeholder": "Escribe una nota privada sobre este cliente...",
    "notes.add": "Añadir nota",
    "notes.edit": "Editar",
    "notes.empty_content": "La nota no puede estar vacía.",
    "notes.error": "No se pudo guardar la nota",
    "notes.empty": "Aún no hay notas.",
    "inbox.title": "Consultas",
    "inbox.thread_title": "Consulta",
    "inbox.filter": "Mostrar",
    "inbox.filters.all": "Todas",
    "inbox.filters.open": "Abiertas",
    "inbox.filters.resolved": "Resueltas",
    "inbox.empty": "No hay consultas aquí.",
    "inbox.open": "Abrir",
    "inbox.back": "Volver a consultas",
    "inbox.pick_first": "Elige primero una consulta.",
    "inbox.not_found": "Consulta no encontrada.",
    "inbox.no_subject": "(sin asunto)",
    "inbox.no_messages": "Aún no hay mensajes.",
    "inbox.status.open": "Abierta",
    "inbox.status.resolved": "Resuelta",
    "inbox.priority.high": "Alta",
    "inbox.priority.medium": "Media",
    "inbox.priority.low": "Baja",
    "inbox.you": "Tú",
    "inbox.client": "Cliente",
    "inbox.resolve": "Marcar como resuelta",
    "inbox.resolved": "Consulta resuelta.",
    "inbox.closed": "Esta consulta está resuelta.",
    "inbox.reply_placeholder": "Escribe una respuesta...",
    "inbox.empty_message": "El mensaje está vacío.",
    "inbox.error": "No se pudo actualizar la consulta",
    "settings.title": "Ajustes",
    "settings.language": "Idioma",
    "settings.profile": "Perfil",
    "settings.profile_saved": "Perfil actualizado.",
    "settings.change_password": "Cambiar contraseña",
    "settings.password_changed": "Contraseña cambiada.",
    "settings.error": "No se pudo guardar el cambio",
    "admin.title": "Entrenadores",
    "admin.create_title": "Nuevo entrenador",
    "admin.create": "Crear entrenador",
    "admin.created": "{name} ya puede iniciar sesión.",
    "admin.empty": "Aún no hay entrenadores.",
    "admin.reset_password": "Restablecer contraseña",
    "admin.password_reset": "Contraseña restablecida para {name}.",
    "admin.confirm_delete": "¿Eliminar a {name} y sus clientes?",
    "admin.deleted": "{name} se ha eliminado.",
    "admin.error": "No se pudo actualizar el entrenador",
}
ES.update({f"exercises.muscle_groups.{k}": v for k, v in _MUSCLE_GROUPS_ES.items()})

TRANSLATIONS: Dict[str, Dict[str, str]] = {"en": EN, "es": ES}

_language = DEFAULT_LANGUAGE


def set_language(language: str) -> None:
    global _language
    if language not in TRANSLATIONS:
        LOGGER.warning("Unsupported language %r, using %s", language, DEFAULT_LANGUAGE)
        language = DEFAULT_LANGUAGE
    _language = language
    formatting.set_locale(language)


def get_language() -> str:
    return _language


def t(key: str, **params: object) -> str:
    text = TRANSLATIONS[_language].get(key)
    if text is None:
        text = EN.get(key, key)
    if not params:
        return text
    try:
        return text.format(**params)
    except (KeyError, IndexError, ValueError):
        return text
