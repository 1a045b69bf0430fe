# filmdb/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from filmdb.common.settings import get_settings

cfg = get_settings()
router = APIRouter(prefix=cfg.api.prefix, tags=["health"])

@router.get("/health")
def health():
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
    }
