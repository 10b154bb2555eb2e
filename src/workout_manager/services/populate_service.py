"""
Populate service

Runs the full pipeline for the "populate" operation:

1. Decide where the workout document comes from (remote URL or local note)
2. Build the templated table and format plan
3. Resolve placeholder tags to A1 references
4. Hand the result to the renderer (JSON or an xlsx worksheet)

Workbook layout used by populate_workbook():
- J1: configuration cell; its note holds `key: value` source settings and
      its value, when it is a URL, is the fallback source URL
- J2: local data cell; its note holds the workout document
- J3: receives the time of the last population
"""

import io
import logging
from typing import List, Optional, Tuple

from openpyxl import load_workbook

from workout_manager.config import settings
from workout_manager.models import WorkoutReport
from workout_manager.services.export_service import ExportService
from workout_manager.services.reference_resolver import resolve
from workout_manager.services.remote_source import fetch_remote_text
from workout_manager.services.source_config import SourceConfig, parse_config_note
from workout_manager.services.table_builder import TableBuilder
from workout_manager.utils import now_formatted

logger = logging.getLogger(__name__)

CONFIG_CELL = "J1"
DATA_CELL = "J2"
STAMP_CELL = "J3"

NO_DATA_MESSAGE = (
    "No workout data found. Enable remote fetch with a url in the "
    f"{CONFIG_CELL} note, or put the workouts in the {DATA_CELL} note."
)


class NoDataSourceError(Exception):
    """Neither a remote source nor local workout text is available."""
    pass


class WorkbookReadError(Exception):
    """The uploaded file is not a readable xlsx workbook."""
    pass


class PopulateService:
    """Service for turning workout notation into a rendered report."""

    @staticmethod
    def build_report(text: str) -> Tuple[WorkoutReport, List[str]]:
        """
        Run the core pipeline on a document.

        Returns:
            Tuple of (resolved report, parse warnings)
        """
        builder = TableBuilder()
        report = builder.build(text)
        report.rows = resolve(report.rows)
        return report, list(builder.warnings)

    @staticmethod
    def resolve_document(config: SourceConfig, local_text: Optional[str]) -> str:
        """
        Pick the workout document for a populate run.

        Remote fetch wins when enabled; otherwise the local text is used.

        Raises:
            NoDataSourceError: If neither source is usable
            RemoteFetchError: If the remote fetch fails
        """
        if config.remote_enabled and config.url:
            return fetch_remote_text(config.url, config.auth_token)
        if config.remote_enabled:
            logger.warning("Remote fetch enabled but no url configured")
        if local_text and local_text.strip():
            return local_text
        raise NoDataSourceError(NO_DATA_MESSAGE)

    @staticmethod
    def populate(
        note: Optional[str],
        local_text: Optional[str],
    ) -> Tuple[WorkoutReport, List[str]]:
        """Resolve the source from a config note plus settings, then build the report."""
        config = parse_config_note(note).merged_with(settings)
        document = PopulateService.resolve_document(config, local_text)
        return PopulateService.build_report(document)

    @staticmethod
    def populate_workbook(content: bytes) -> bytes:
        """
        Populate the active sheet of an uploaded workbook.

        Raises:
            WorkbookReadError: If the content is not an xlsx workbook
            NoDataSourceError: If the workbook provides no workout data
            RemoteFetchError: If the configured remote fetch fails
        """
        try:
            wb = load_workbook(io.BytesIO(content))
        except Exception as e:
            raise WorkbookReadError(f"Could not read workbook: {e}") from e

        ws = wb.active
        note = ExportService.read_cell_note(ws, CONFIG_CELL)
        config = parse_config_note(note)
        cell_url = ExportService.read_cell_value(ws, CONFIG_CELL).strip()
        if not config.url and cell_url.startswith(("http://", "https://")):
            config.url = cell_url
        config = config.merged_with(settings)

        document = PopulateService.resolve_document(
            config,
            ExportService.read_cell_note(ws, DATA_CELL),
        )
        report, warnings = PopulateService.build_report(document)

        ExportService.write_table(ws, report)
        ws[STAMP_CELL] = now_formatted("stamp")
        logger.info(
            f"Populated sheet '{ws.title}' with {report.row_count} rows "
            f"({len(warnings)} parse warnings)"
        )
        return ExportService.save_workbook(wb)
