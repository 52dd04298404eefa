"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Body metrics and progress photos for one client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import BodyMetricsRepo, ProgressPhotosRepo
from services.query_cache import QueryCache

METRIC_FIELDS = ["weight", "bodyFat", "waist", "hips", "chest", "arm", "leg"]
FRAME_COLUMNS = ["loggedAt", *METRIC_FIELDS, "notes"]


def metrics_frame(metrics: List[Dict[str, Any]]) -> pd.DataFrame:
    """Metrics as a frame ordered by ``loggedAt`` with numeric measure columns."""
    df = pd.DataFrame(metrics or [])
    for col in FRAME_COLUMNS:
        if col not in df.columns:
            df[col] = pd.Series(dtype="object")
    df = df[FRAME_COLUMNS].copy()
    df["loggedAt"] = pd.to_datetime(df["loggedAt"], errors="coerce", utc=True)
    for col in METRIC_FIELDS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df = df.dropna(subset=["loggedAt"])
    return df.sort_values("loggedAt").reset_index(drop=True)


def latest_metric(metrics: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not metrics:
        return None
    return max(metrics, key=lambda m: str(m.get("loggedAt") or ""))


def weight_change(metrics: List[Dict[str, Any]]) -> Optional[float]:
    """Latest minus first logged weight, None with fewer than two weigh-ins."""
    df = metrics_frame(metrics).dropna(subset=["weight"])
    if len(df) < 2:
        return None
    return float(df["weight"].iloc[-1] - df["weight"].iloc[0])


@dataclass
class BodyMetricsService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.metrics = BodyMetricsRepo(self.api)
        self.photos = ProgressPhotosRepo(self.api)

    def list_metrics(self, client_id: str) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                return self.metrics.list(userId=client_id)
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise

        return self.cache.fetch(("body-metrics", str(client_id)), _load)

    def log_metric(self, client_id: str, values: Dict[str, Any]) -> Any:
        body = {k: v for k, v in values.items() if v is not None}
        body["userId"] = client_id
        created = self.metrics.create(body)
        self.cache.invalidate(("body-metrics", str(client_id)), ("clients", str(client_id)))
        return created

    def list_photos(self, client_id: str) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                return self.photos.list(userId=client_id)
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise

        return self.cache.fetch(("progress-photos", str(client_id)), _load)

    def upload_photo(self, client_id: str, image_url: str, caption: Optional[str] = None) -> Any:
        url = (image_url or "").strip()
        if not url:
            raise ValueError("Image URL is required")
        body = {"imageUrl": url, "userId": client_id}
        if caption and caption.strip():
            body["caption"] = caption.strip()
        created = self.photos.create(body)
        self.cache.invalidate(("progress-photos", str(client_id)))
        return created

    def delete_photo(self, client_id: str, photo_id: str) -> None:
        self.photos.delete(photo_id)
        self.cache.invalidate(("progress-photos", str(client_id)))
