"""API routes for workout report population."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, Field

from workout_manager.config import settings
from workout_manager.models import FormatRange
from workout_manager.parsers.entry_parser import EntryParser
from workout_manager.parsers.models import WorkoutEntry
from workout_manager.services.export_service import ExportService
from workout_manager.services.populate_service import (
    NoDataSourceError,
    PopulateService,
    WorkbookReadError,
)
from workout_manager.services.remote_source import RemoteFetchError
from workout_manager.utils import now_formatted

logger = logging.getLogger(__name__)

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------


class ParseEntryRequest(BaseModel):
    """Request model for POST /parse/entry"""
    text: str = Field(..., max_length=50000, description="A single workout block")


class ParseEntryResponse(BaseModel):
    entry: WorkoutEntry
    warnings: List[str] = Field(default_factory=list)


class PopulateRequest(BaseModel):
    """Request model for POST /populate and /populate/xlsx"""
    text: Optional[str] = Field(default=None, max_length=500000, description="Workout notation document")
    note: Optional[str] = Field(default=None, max_length=5000, description="`key: value` source config (remote, url, auth)")


class PopulateResponse(BaseModel):
    rows: List[List[str]]
    format_plan: List[FormatRange]
    warnings: List[str] = Field(default_factory=list)
    generated_at: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _populate_or_alert(payload: PopulateRequest):
    """Run populate, mapping source problems to operator-facing HTTP errors."""
    try:
        return PopulateService.populate(payload.note, payload.text)
    except NoDataSourceError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except RemoteFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def _xlsx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/health")
def health() -> Dict[str, Any]:
    return {"status": "ok", "environment": settings.ENVIRONMENT}


@router.post("/parse/entry", response_model=ParseEntryResponse)
def parse_entry(payload: ParseEntryRequest):
    """Parse one workout block and return its structured entry."""
    parser = EntryParser()
    entry = parser.parse(payload.text.strip())
    return ParseEntryResponse(entry=entry, warnings=parser.warnings)


@router.post("/populate", response_model=PopulateResponse)
def populate(payload: PopulateRequest):
    """
    Build the resolved report table for a workout document.

    The document is fetched remotely when the note (or settings) enable it,
    otherwise `text` is used.
    """
    report, warnings = _populate_or_alert(payload)
    return PopulateResponse(
        rows=report.rows,
        format_plan=report.format_plan,
        warnings=warnings,
        generated_at=now_formatted("datetime"),
    )


@router.post("/populate/xlsx")
def populate_xlsx(payload: PopulateRequest):
    """Same as /populate, rendered as a formatted xlsx file."""
    report, _ = _populate_or_alert(payload)
    return _xlsx_response(ExportService.render_workbook(report), "workouts.xlsx")


@router.post("/populate/workbook")
def populate_workbook(file: UploadFile = File(...)):
    """
    Populate an uploaded workbook in place and return it.

    Source settings are read from the J1 note, local workouts from the J2 note.
    """
    content = file.file.read()
    try:
        populated = PopulateService.populate_workbook(content)
    except (WorkbookReadError, NoDataSourceError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except RemoteFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return _xlsx_response(populated, file.filename or "workouts.xlsx")
