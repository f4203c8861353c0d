from __future__ import annotations

from fastapi import APIRouter

from skillmatch.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    return {"ok": True, "app": settings.app_name, "env": settings.app_env}
