"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

MUSCLE_GROUPS = [
    "PECTORAL", "DORSAL", "PIERNA", "HOMBRO", "BICEPS", "TRICEPS",
    "ABDOMINALES", "LUMBAR", "CARDIO", "MOVILIDAD", "CALENTAMIENTO",
    "CUADRICEPS", "FEMORAL", "GLUTEO", "GEMELO", "DELTOIDES",
]

# Preset avatars served by the backend's static files
AVATARS = [f"/avatars/avatar-0{i}.png" for i in range(1, 9)]

GENDERS = ["MALE", "FEMALE", "OTHER"]


# Wizard defaults for an exercise added to a day
DEFAULT_TARGET_SETS = 3
DEFAULT_TARGET_REPS = "8-12"
DEFAULT_TARGET_RIR = 2
DEFAULT_REST_SECONDS = 90

# Calendar
MAX_CHIPS_PER_DAY = 3
UPCOMING_LIMIT = 5
DEFAULT_SESSION_TIME = "09:00"
