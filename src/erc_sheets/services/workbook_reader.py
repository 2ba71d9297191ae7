"""Read ERC worksheets from uploaded Excel workbooks."""
import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, List, Optional, Union

from openpyxl import load_workbook

from erc_sheets.exceptions import WorkbookReadError
from erc_sheets.models.template import ExtractionResult
from erc_sheets.services.template_registry import TemplateRegistry, get_erc_template
from erc_sheets.utils.cell_refs import cell_to_indices

logger = logging.getLogger(__name__)


def _cell_value(value: Any) -> Any:
    # Dates come back as datetime objects; keep them as ISO text like a typed entry
    if isinstance(value, datetime):
        return value.date().isoformat() if value.time() == time(0) else value.isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    return value


def read_workbook_grid(workbook_path: Union[Path, str], registry: Optional[TemplateRegistry] = None) -> List[List[Any]]:
    """
    Load the template worksheet of an .xlsx file as an A1-anchored grid.

    Formulas are read as their cached values. Only the block covering the
    template's mapped cells is read.

    Raises:
        WorkbookReadError: if the file is missing, unreadable or lacks the
            template worksheet.
    """
    registry = registry or get_erc_template()
    path = Path(workbook_path)
    if not path.exists():
        raise WorkbookReadError(f"Workbook not found: {path}")

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except Exception as e:
        raise WorkbookReadError(f"Failed to load workbook {path}: {str(e)}") from e

    try:
        if registry.sheet_name not in workbook.sheetnames:
            raise WorkbookReadError(
                f"Required sheet not found: {registry.sheet_name}. "
                f"Available sheets: {', '.join(workbook.sheetnames)}"
            )
        sheet = workbook[registry.sheet_name]
        max_row, max_column = cell_to_indices(registry.bounding_range().split(':')[1])
        grid = [
            [_cell_value(value) for value in row]
            for row in sheet.iter_rows(min_row=1, max_row=max_row + 1,
                                       min_col=1, max_col=max_column + 1, values_only=True)
        ]
    finally:
        workbook.close()

    logger.info(f"[read_workbook_grid] Read {len(grid)} rows from '{registry.sheet_name}' in {path.name}")
    return grid


def extract_workbook(workbook_path: Union[Path, str], registry: Optional[TemplateRegistry] = None) -> ExtractionResult:
    """Extract the typed record from an .xlsx copy of the template."""
    registry = registry or get_erc_template()
    return registry.extract(read_workbook_grid(workbook_path, registry))
