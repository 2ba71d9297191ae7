from datetime import date, datetime

import pytest
from openpyxl import Workbook

from erc_sheets.constants.erc_template_mappings import SHEET_NAME
from erc_sheets.exceptions import WorkbookReadError
from erc_sheets.services.workbook_reader import extract_workbook, read_workbook_grid


@pytest.fixture
def erc_workbook(tmp_path):
    """
    Fixture writing an .xlsx copy of the ERC worksheet.
    Cells are given as {cell: value}; extra sheets come before the template.
    """
    def _build(cells, sheet_name=SHEET_NAME):
        workbook = Workbook()
        workbook.active.title = 'Instructions'
        sheet = workbook.create_sheet(sheet_name)
        for cell, value in cells.items():
            sheet[cell] = value
        path = tmp_path / 'erc.xlsx'
        workbook.save(path)
        return path
    return _build


def test_extract_workbook(erc_workbook):
    path = erc_workbook({
        'A1': 'Filer remarks',
        'A2': '  Filed for Q2 2020 ',
        'K8': 42,
        'C9': True,
        'D9': 'No',
        'B31': 50000,
        'B32': '$61,250.50',
        'K58': date(2021, 3, 15),
        'C118': 0.0625,
    })

    result = extract_workbook(path)

    assert result.errors == []
    assert result.values == {
        'filerRemarks': 'Filed for Q2 2020',
        'fullTimeW2Count2020': 42.0,
        'shutdown_q2_2020': True,
        'shutdown_q3_2020': False,
        'gross_2019_q1': 50000.0,
        'gross_2019_q2': 61250.5,
        'dateFiledLabel': '2021-03-15',
        'state_2020_q1_suiRate': 0.0625,
    }


def test_parse_errors_are_collected(erc_workbook):
    path = erc_workbook({'B31': '1,2,3', 'B32': 100})

    result = extract_workbook(path)

    assert result.values == {'gross_2019_q2': 100.0}
    assert [(error.field_name, error.cell) for error in result.errors] == [('gross_2019_q1', 'B31')]


def test_grid_is_a1_anchored(erc_workbook):
    path = erc_workbook({'B2': 'x', 'C3': datetime(2021, 3, 15, 9, 0)})

    grid = read_workbook_grid(path)

    assert grid[1][1] == 'x'
    assert grid[2][2] == '2021-03-15T09:00:00'
    assert all(len(row) <= 12 for row in grid)


def test_missing_template_sheet(erc_workbook):
    path = erc_workbook({'A2': 'remarks'}, sheet_name='Sheet2')

    with pytest.raises(WorkbookReadError) as excinfo:
        read_workbook_grid(path)
    assert 'Available sheets: Instructions, Sheet2' in str(excinfo.value)


def test_missing_file(tmp_path):
    with pytest.raises(WorkbookReadError):
        read_workbook_grid(tmp_path / 'missing.xlsx')


def test_unreadable_file(tmp_path):
    path = tmp_path / 'broken.xlsx'
    path.write_text('not a workbook', encoding='utf-8')

    with pytest.raises(WorkbookReadError):
        read_workbook_grid(path)
