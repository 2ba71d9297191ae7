"""
Script to read an ERC worksheet and print its fields as JSON.

The worksheet is read from Google Sheets, or from an .xlsx file with
--workbook.
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from erc_sheets.exceptions import WorkbookReadError
from erc_sheets.logger_config import logger as package_logger
from erc_sheets.services.google_sheets_service import GoogleSheetsService
from erc_sheets.services.template_registry import get_erc_template
from erc_sheets.services.workbook_reader import extract_workbook

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Extract the fields of an ERC worksheet as JSON.')
    parser.add_argument('spreadsheet_id', nargs='?', default=None,
                        help='Spreadsheet to read (defaults to ERC_SPREADSHEET_ID)')
    parser.add_argument('--workbook', metavar='PATH', default=None,
                        help='Read an .xlsx copy of the template instead of Google Sheets')
    parser.add_argument('--summary', action='store_true',
                        help='Group the extracted fields by template section')
    parser.add_argument('--strict', action='store_true',
                        help='Also fail when data fields are missing or mistyped')
    return parser


def main(argv: Optional[List[str]] = None, sheets_service: Optional[GoogleSheetsService] = None) -> int:
    # Load environment variables
    load_dotenv()
    if os.getenv('DEBUG'):
        package_logger.setLevel(logging.DEBUG)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workbook:
        source = args.workbook
        registry = sheets_service.registry if sheets_service else get_erc_template()
        try:
            result = extract_workbook(args.workbook, registry)
        except WorkbookReadError as e:
            logger.error(str(e))
            return 1
    else:
        source = args.spreadsheet_id or os.getenv('ERC_SPREADSHEET_ID')
        if not source:
            parser.error("a spreadsheet id, --workbook or the ERC_SPREADSHEET_ID environment variable is required")
        sheets = sheets_service or GoogleSheetsService()
        registry = sheets.registry
        result = sheets.extract_spreadsheet(source)

    output = result.to_dict()
    if args.summary:
        output['summary'] = registry.summarize(result.values)

    exit_code = 1 if result.errors else 0
    if args.strict:
        validation = registry.validate_record(result.values)
        output['validation'] = validation.messages
        if not validation.is_valid:
            exit_code = 1

    print(json.dumps(output, indent=2, default=str))
    if exit_code:
        logger.error(f"Extraction of {source} finished with problems")
    else:
        logger.info(f"Extracted {len(result.values)} fields from {source}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
