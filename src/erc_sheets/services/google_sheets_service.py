import logging
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from erc_sheets.models.template import CellWrite, ExtractionResult, PopulationResult
from erc_sheets.services.template_registry import TemplateRegistry, get_erc_template
from erc_sheets.utils.google_auth import load_credentials

logger = logging.getLogger(__name__)


def _is_rate_limited(error: HttpError) -> bool:
    status = getattr(error.resp, 'status', None)
    return str(status) == '429' or 'RATE_LIMIT_EXCEEDED' in str(error)


class GoogleSheetsService:
    """Reads and writes the cells of an ERC worksheet through the Sheets API."""

    max_retries = 5
    base_delay = 2

    def __init__(self, service=None, registry: Optional[TemplateRegistry] = None):
        if service is None:
            service = build('sheets', 'v4', credentials=load_credentials())
        self.service = service
        self.registry = registry or get_erc_template()

    def _execute_with_retry(self, request, description: str) -> Dict[str, Any]:
        """Execute an API request, backing off while the quota is exhausted."""
        for attempt in range(self.max_retries):
            try:
                logger.debug(f"[{description}] Attempt {attempt+1}/{self.max_retries}")
                return request.execute()
            except HttpError as e:
                if _is_rate_limited(e) and attempt < self.max_retries - 1:
                    delay = self.base_delay * (2 ** attempt)
                    logger.info(
                        f"[{description}] Rate limit exceeded; attempt {attempt+1}/{self.max_retries}. "
                        f"Retrying in {delay} seconds."
                    )
                    time.sleep(delay)
                    continue
                logger.error(f"[{description}] Error on attempt {attempt+1}/{self.max_retries}: {e}")
                raise

    def read_template_grid(self, spreadsheet_id: str) -> List[List[Any]]:
        """Read the A1-anchored block covering every mapped cell of the template."""
        range_name = self.registry.qualified_range(self.registry.bounding_range())
        logger.info(f"[read_template_grid] Reading {range_name} from {spreadsheet_id}")
        request = self.service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id,
            range=range_name,
            valueRenderOption='UNFORMATTED_VALUE'
        )
        result = self._execute_with_retry(request, 'read_template_grid')
        grid = result.get('values', [])
        logger.debug(f"[read_template_grid] Retrieved {len(grid)} rows")
        return grid

    def read_cells(self, spreadsheet_id: str, cells: Iterable[str]) -> Dict[str, Any]:
        """
        Read individual cells with one batchGet call.

        Returns:
            {cell: raw value}, None for cells the API returned no value for.
        """
        cells = list(cells)
        if not cells:
            return {}
        request = self.service.spreadsheets().values().batchGet(
            spreadsheetId=spreadsheet_id,
            ranges=[self.registry.qualified_range(cell) for cell in cells],
            valueRenderOption='UNFORMATTED_VALUE'
        )
        result = self._execute_with_retry(request, 'read_cells')

        # valueRanges come back in request order
        values = {}
        for cell, entry in zip(cells, result.get('valueRanges', [])):
            rows = entry.get('values') or [[]]
            values[cell] = rows[0][0] if rows[0] else None
        for cell in cells:
            values.setdefault(cell, None)
        logger.debug(f"[read_cells] Retrieved values for {len(values)} cells")
        return values

    def write_cells(self, spreadsheet_id: str, writes: Iterable[CellWrite]) -> int:
        """
        Write cell values with one batchUpdate call, parsed as if typed by a user.

        Returns:
            The number of cells the API reports as updated.
        """
        data = [
            {'range': self.registry.qualified_range(cell), 'values': [[value]]}
            for cell, value in writes
        ]
        if not data:
            logger.info("[write_cells] Nothing to write")
            return 0
        request = self.service.spreadsheets().values().batchUpdate(
            spreadsheetId=spreadsheet_id,
            body={'valueInputOption': 'USER_ENTERED', 'data': data}
        )
        result = self._execute_with_retry(request, 'write_cells')
        updated = result.get('totalUpdatedCells', 0)
        logger.info(f"[write_cells] Updated {updated} cells in {spreadsheet_id}")
        return updated

    def extract_spreadsheet(self, spreadsheet_id: str) -> ExtractionResult:
        """Read a live worksheet and extract its typed record."""
        return self.registry.extract(self.read_template_grid(spreadsheet_id))

    def populate_spreadsheet(self, spreadsheet_id: str, record: Mapping[str, Any],
                             allow_partial: bool = False) -> PopulationResult:
        """
        Write a record into a live worksheet.

        Nothing is written when any field fails to format, unless
        ``allow_partial`` is set.
        """
        result = self.registry.populate(record)
        if result.errors and not allow_partial:
            logger.error(
                f"[populate_spreadsheet] {len(result.errors)} field(s) could not be formatted; "
                f"nothing written to {spreadsheet_id}"
            )
            return result
        result.updated_cells = self.write_cells(spreadsheet_id, result.writes)
        return result
