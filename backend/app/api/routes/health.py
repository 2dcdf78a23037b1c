from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import inspect, text

from app.core.config import Settings, get_settings
from app.db.bootstrap import OCCURRENCE_UNIQUE_INDEXES, REQUIRED_TABLES
from app.db.session import engine

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/ready")
def health_ready(settings: Settings = Depends(get_settings)) -> JSONResponse:
    reachable = True
    error: str | None = None
    missing_tables: list[str] = []
    missing_indexes: list[str] = []

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
            inspector = inspect(connection)
            missing_tables = sorted(REQUIRED_TABLES - set(inspector.get_table_names()))
            if "schedule_entries" not in missing_tables:
                index_names = {item["name"] for item in inspector.get_indexes("schedule_entries")}
                missing_indexes = sorted(OCCURRENCE_UNIQUE_INDEXES - index_names)
    except Exception as exc:  # pragma: no cover - environment dependent
        reachable = False
        error = str(exc)

    # Without the occurrence indexes two racing writes can both land in one slot.
    ready = reachable and not missing_tables and not missing_indexes
    payload = {
        "status": "ok" if ready else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {
            "ok": reachable,
            "missing_tables": missing_tables,
            "missing_indexes": missing_indexes,
            "error": error,
        },
        "workload_defaults": {
            "credit_hours_ratio": settings.default_credit_hours_ratio,
            "max_faculty_credits": settings.default_max_faculty_credits,
            "co_faculty_weight": settings.default_co_faculty_weight,
        },
    }
    return JSONResponse(status_code=200 if ready else 503, content=payload)
