import json
from unittest import mock

import pytest
from openpyxl import Workbook

from erc_sheets.scripts import extract_template
from erc_sheets.services.google_sheets_service import GoogleSheetsService


def make_sheets(registry, grid):
    api = mock.MagicMock()
    api.spreadsheets.return_value.values.return_value.get.return_value.execute.return_value = {'values': grid}
    return GoogleSheetsService(service=api, registry=registry), api


@pytest.fixture(autouse=True)
def clean_env():
    with mock.patch.dict('os.environ', {}, clear=True), \
            mock.patch.object(extract_template, 'load_dotenv'):
        yield


def test_prints_extracted_values(tiny_template, capsys):
    sheets, api = make_sheets(tiny_template, [['Company'], [None, 'Acme', 'yes'], [], ['Wages', 1200, 0.05]])

    assert extract_template.main(['sheet-id'], sheets_service=sheets) == 0

    output = json.loads(capsys.readouterr().out)
    assert output['values'] == {'companyName': 'Acme', 'isSeasonal': True, 'wages': 1200.0, 'taxRate': 0.05}
    assert output['errors'] == []
    get_kwargs = api.spreadsheets.return_value.values.return_value.get.call_args.kwargs
    assert get_kwargs['spreadsheetId'] == 'sheet-id'


def test_parse_errors_exit_with_1(tiny_template, capsys):
    sheets, _ = make_sheets(tiny_template, [[], [None, 'Acme', 'maybe']])

    assert extract_template.main(['sheet-id'], sheets_service=sheets) == 1

    output = json.loads(capsys.readouterr().out)
    assert output['values'] == {'companyName': 'Acme'}
    assert output['errors'][0]['field_name'] == 'isSeasonal'


def test_summary(tiny_template, capsys):
    sheets, _ = make_sheets(tiny_template, [[], [None, 'Acme'], [], [None, 10]])

    extract_template.main(['sheet-id', '--summary'], sheets_service=sheets)

    output = json.loads(capsys.readouterr().out)
    assert output['summary'] == {'company': {'companyName': 'Acme'}, 'payroll': {'wages': 10.0}}


def test_strict_fails_on_missing_fields(tiny_template, capsys):
    sheets, _ = make_sheets(tiny_template, [[], [None, 'Acme']])

    assert extract_template.main(['sheet-id', '--strict'], sheets_service=sheets) == 1

    output = json.loads(capsys.readouterr().out)
    assert 'Missing value: wages (B4)' in output['validation']


def test_spreadsheet_id_from_environment(tiny_template):
    sheets, api = make_sheets(tiny_template, [])

    with mock.patch.dict('os.environ', {'ERC_SPREADSHEET_ID': 'env-sheet'}):
        assert extract_template.main([], sheets_service=sheets) == 0

    get_kwargs = api.spreadsheets.return_value.values.return_value.get.call_args.kwargs
    assert get_kwargs['spreadsheetId'] == 'env-sheet'


def test_missing_spreadsheet_id(tiny_template):
    sheets, _ = make_sheets(tiny_template, [])

    with pytest.raises(SystemExit) as excinfo:
        extract_template.main([], sheets_service=sheets)
    assert excinfo.value.code == 2


def test_reads_workbook(tiny_template, tmp_path, capsys):
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = 'Tiny Sheet'
    sheet['B2'] = 'Acme'
    sheet['B4'] = 1200
    path = tmp_path / 'tiny.xlsx'
    workbook.save(path)
    sheets, api = make_sheets(tiny_template, [])

    assert extract_template.main(['--workbook', str(path)], sheets_service=sheets) == 0

    output = json.loads(capsys.readouterr().out)
    assert output['values'] == {'companyName': 'Acme', 'wages': 1200.0}
    api.spreadsheets.assert_not_called()


def test_unreadable_workbook(tmp_path):
    assert extract_template.main(['--workbook', str(tmp_path / 'missing.xlsx')]) == 1
