import json
from unittest import mock

import pytest

from erc_sheets.scripts import populate_template
from erc_sheets.services.google_sheets_service import GoogleSheetsService


@pytest.fixture(autouse=True)
def clean_env():
    with mock.patch.dict('os.environ', {}, clear=True), \
            mock.patch.object(populate_template, 'load_dotenv'):
        yield


@pytest.fixture
def record_file(tmp_path):
    def _write(record):
        path = tmp_path / 'record.json'
        path.write_text(json.dumps(record), encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def sheets(erc_template):
    api = mock.MagicMock()
    api.spreadsheets.return_value.values.return_value.batchUpdate.return_value.execute.return_value = {
        'totalUpdatedCells': 2
    }
    return GoogleSheetsService(service=api, registry=erc_template)


def batch_update_kwargs(sheets):
    return sheets.service.spreadsheets.return_value.values.return_value.batchUpdate.call_args.kwargs


def test_dry_run_prints_writes(record_file, capsys):
    path = record_file({'gross_2019_q1': 50000})

    assert populate_template.main([path, '--dry-run']) == 0

    output = json.loads(capsys.readouterr().out)
    assert output == {'writes': [{'cell': 'B31', 'value': '50000'}], 'errors': []}


def test_writes_record(record_file, sheets, capsys):
    path = record_file({'gross_2019_q1': 50000, 'shutdown_q2_2020': True})

    assert populate_template.main([path, '--spreadsheet-id', 'sheet-id'], sheets_service=sheets) == 0

    kwargs = batch_update_kwargs(sheets)
    assert kwargs['spreadsheetId'] == 'sheet-id'
    assert kwargs['body']['data'] == [
        {'range': "'Understandable Data-final'!C9", 'values': [['TRUE']]},
        {'range': "'Understandable Data-final'!B31", 'values': [['50000']]},
    ]
    output = json.loads(capsys.readouterr().out)
    assert output['updated_cells'] == 2


def test_unknown_field(record_file, sheets):
    path = record_file({'gross_2019_q1': 1, 'grossQ1': 2})

    assert populate_template.main([path, '--spreadsheet-id', 'sheet-id'], sheets_service=sheets) == 1
    sheets.service.spreadsheets.return_value.values.return_value.batchUpdate.assert_not_called()


def test_format_errors_write_nothing(record_file, sheets, capsys):
    path = record_file({'gross_2019_q1': 'fifty thousand', 'shutdown_q2_2020': True})

    assert populate_template.main([path, '--spreadsheet-id', 'sheet-id'], sheets_service=sheets) == 1

    sheets.service.spreadsheets.return_value.values.return_value.batchUpdate.assert_not_called()
    output = json.loads(capsys.readouterr().out)
    assert output['errors'][0]['cell'] == 'B31'


def test_allow_partial_writes_valid_fields(record_file, sheets):
    path = record_file({'gross_2019_q1': 'fifty thousand', 'shutdown_q2_2020': True})

    exit_code = populate_template.main(
        [path, '--spreadsheet-id', 'sheet-id', '--allow-partial'], sheets_service=sheets)

    assert exit_code == 1
    assert batch_update_kwargs(sheets)['body']['data'] == [
        {'range': "'Understandable Data-final'!C9", 'values': [['TRUE']]},
    ]


def test_copy_as_populates_the_copy(record_file, sheets, capsys):
    path = record_file({'gross_2019_q1': 50000})
    drive = mock.MagicMock()
    drive.copy_template.return_value = {'id': 'copy-id', 'web_view_link': 'https://example.com/copy-id'}

    with mock.patch.dict('os.environ', {'ERC_TEMPLATE_ID': 'template-id', 'ERC_OUTPUT_FOLDER_ID': 'folder-id'}):
        exit_code = populate_template.main(
            [path, '--copy-as', 'Acme ERC'], sheets_service=sheets, drive_service=drive)

    assert exit_code == 0
    template_id, name, parent_id = drive.copy_template.call_args.args
    assert template_id == 'template-id'
    assert name.startswith('Acme ERC_')
    assert parent_id == 'folder-id'
    assert batch_update_kwargs(sheets)['spreadsheetId'] == 'copy-id'
    output = json.loads(capsys.readouterr().out)
    assert output['web_view_link'] == 'https://example.com/copy-id'


def test_copy_as_requires_template_id(record_file, sheets):
    path = record_file({'gross_2019_q1': 50000})

    with pytest.raises(ValueError):
        populate_template.main([path, '--copy-as', 'Acme ERC'], sheets_service=sheets, drive_service=mock.MagicMock())


def test_record_must_be_an_object(record_file):
    path = record_file([1, 2, 3])

    assert populate_template.main([path, '--dry-run']) == 1


def test_missing_record_file(tmp_path):
    assert populate_template.main([str(tmp_path / 'missing.json'), '--dry-run']) == 1


def test_missing_spreadsheet_id(record_file, sheets):
    path = record_file({'gross_2019_q1': 50000})

    with pytest.raises(SystemExit):
        populate_template.main([path], sheets_service=sheets)


def test_dry_run_reports_format_errors(record_file, capsys):
    path = record_file({'gross_2019_q1': 2 ** 53 + 1, 'gross_2019_q2': 10})

    assert populate_template.main([path, '--dry-run']) == 1

    output = json.loads(capsys.readouterr().out)
    assert output['writes'] == [{'cell': 'B32', 'value': '10'}]
    assert output['errors'][0]['cell'] == 'B31'


def test_text_is_sent_as_literal(record_file, sheets):
    path = record_file({'dateFiledLabel': '2021-03-15', 'filerRemarks': '=IMPORTDATA("http://example.com")'})

    assert populate_template.main([path, '--spreadsheet-id', 'sheet-id'], sheets_service=sheets) == 0

    assert batch_update_kwargs(sheets)['body']['data'] == [
        {'range': "'Understandable Data-final'!A2", 'values': [['\'=IMPORTDATA("http://example.com")']]},
        {'range': "'Understandable Data-final'!K58", 'values': [["'2021-03-15"]]},
    ]
