"""
Script to write a JSON record of ERC fields into a Google Sheets worksheet.

The record file holds a single object of {field name: value}. With --copy-as
the template workbook (ERC_TEMPLATE_ID) is copied first, into
ERC_OUTPUT_FOLDER_ID when set, and the copy is populated.
"""
import argparse
import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from erc_sheets.exceptions import UnknownFieldError
from erc_sheets.logger_config import logger as package_logger
from erc_sheets.services.google_drive_service import GoogleDriveService
from erc_sheets.services.google_sheets_service import GoogleSheetsService
from erc_sheets.services.template_registry import get_erc_template

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Populate an ERC worksheet from a JSON record.')
    parser.add_argument('record_file', help='JSON file with {field name: value}')
    parser.add_argument('--spreadsheet-id', default=None,
                        help='Spreadsheet to write (defaults to ERC_SPREADSHEET_ID)')
    parser.add_argument('--copy-as', metavar='NAME', default=None,
                        help='Copy the template workbook under this name and populate the copy')
    parser.add_argument('--dry-run', action='store_true',
                        help='Print the cell writes instead of sending them')
    parser.add_argument('--allow-partial', action='store_true',
                        help='Write the valid fields even when some fields fail to format')
    return parser


def load_record(path: str) -> Dict[str, Any]:
    """Load a record file, which must contain a JSON object."""
    with open(path, 'r', encoding='utf-8') as f:
        record = json.load(f)
    if not isinstance(record, dict):
        raise ValueError(f"Record file {path} must contain a JSON object")
    return record


def copy_template(drive: GoogleDriveService, name: str) -> Dict[str, str]:
    template_id = os.getenv('ERC_TEMPLATE_ID')
    if not template_id:
        raise ValueError("ERC_TEMPLATE_ID environment variable is required")
    copy_name = f"{name}_{datetime.now().strftime('%Y%m%d')}"
    return drive.copy_template(template_id, copy_name, os.getenv('ERC_OUTPUT_FOLDER_ID'))


def main(argv: Optional[List[str]] = None,
         sheets_service: Optional[GoogleSheetsService] = None,
         drive_service: Optional[GoogleDriveService] = None) -> int:
    # Load environment variables
    load_dotenv()
    if os.getenv('DEBUG'):
        package_logger.setLevel(logging.DEBUG)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        record = load_record(args.record_file)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read record: {str(e)}")
        return 1

    try:
        if args.dry_run:
            registry = sheets_service.registry if sheets_service else get_erc_template()
            result = registry.populate(record)
            print(json.dumps(result.to_dict(), indent=2, default=str))
            return 1 if result.errors else 0

        spreadsheet_id = args.spreadsheet_id or os.getenv('ERC_SPREADSHEET_ID')
        output: Dict[str, Any] = {}
        if args.copy_as:
            copied = copy_template(drive_service or GoogleDriveService(), args.copy_as)
            spreadsheet_id = copied['id']
            output['web_view_link'] = copied['web_view_link']
        if not spreadsheet_id:
            parser.error("--spreadsheet-id, --copy-as or ERC_SPREADSHEET_ID is required")

        sheets = sheets_service or GoogleSheetsService()
        result = sheets.populate_spreadsheet(spreadsheet_id, record, allow_partial=args.allow_partial)
    except UnknownFieldError as e:
        logger.error(str(e))
        return 1

    output.update({
        'spreadsheet_id': spreadsheet_id,
        'updated_cells': result.updated_cells,
        'errors': [error.to_dict() for error in result.errors]
    })
    print(json.dumps(output, indent=2, default=str))
    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
