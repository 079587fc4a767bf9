"""Review dashboard HTTP API."""

import math
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from dialog_localizer.anomaly.models import AnomalyTag
from dialog_localizer.anomaly.scanner import ALL_TYPES, AnomalyScanner, matches_filter
from dialog_localizer.database.repositories.dialog_strings_repository import (
    DialogStringsRepository,
)
from dialog_localizer.logging.logger import Log
from dialog_localizer.processor.exceptions import DialogStringNotFoundError


def parse_page(raw: str) -> int:
    """Lenient page number: anything that is not a positive integer means page 1."""
    try:
        page = int(raw)
    except ValueError:
        return 1
    return max(page, 1)


class UpdateRequest(BaseModel):
    id: int | None = None
    dest: str | None = None


def create_app(strings_repo: DialogStringsRepository, page_size: int = 50) -> FastAPI:
    """Build the dashboard application around a strings repository."""
    app = FastAPI(title="Dialog Localizer Review", version="1.0.0")
    scanner = AnomalyScanner()

    @app.get("/")
    def stats() -> Any:
        try:
            report = scanner.scan(strings_repo.list_all())
        except Exception as exc:
            Log.exception(f"Error loading dashboard: {exc}")
            return JSONResponse(status_code=500, content={"error": "Error loading dashboard"})
        return {"total": report.total, **{tag.value: report.counts[tag] for tag in AnomalyTag}}

    @app.get("/review")
    def review(
        page: str = "1",
        anomaly_type: str = Query(ALL_TYPES, alias="type"),
        search: str = "",
    ) -> Any:
        try:
            records = strings_repo.list_all()
        except Exception as exc:
            Log.exception(f"Error loading strings: {exc}")
            return JSONResponse(status_code=500, content={"error": "Error loading strings"})

        current_page = parse_page(page)
        filtered = [r for r in records if matches_filter(r, anomaly_type, search)]
        start = (current_page - 1) * page_size
        return {
            "strings": [asdict(r) for r in filtered[start : start + page_size]],
            "page": current_page,
            "total_pages": math.ceil(len(filtered) / page_size),
            "total": len(filtered),
            "type": anomaly_type,
            "search": search,
        }

    @app.post("/api/update")
    def update(request: UpdateRequest) -> Any:
        if request.id is None or request.dest is None:
            return JSONResponse(status_code=400, content={"error": "Missing id or dest"})
        try:
            strings_repo.update_dest(request.id, request.dest)
        except DialogStringNotFoundError as exc:
            return JSONResponse(status_code=404, content={"error": str(exc)})
        except Exception as exc:
            Log.exception(f"Update of string {request.id} failed: {exc}")
            return JSONResponse(status_code=500, content={"error": "Update failed"})
        return {"success": True}

    return app
