import re
import unittest

from erc_sheets.constants.erc_template_mappings import ERC_TEMPLATE_MAPPINGS, SHEET_NAME
from erc_sheets.models.template import DataType, MappingType
from erc_sheets.services.template_registry import get_erc_template


class TestErcTemplateMappings(unittest.TestCase):
    def setUp(self):
        self.rows = [row for rows in ERC_TEMPLATE_MAPPINGS.values() for row in rows]

    def test_sheet_name(self):
        self.assertEqual(SHEET_NAME, 'Understandable Data-final')

    def test_section_order(self):
        self.assertEqual(list(ERC_TEMPLATE_MAPPINGS), [
            'filerRemarks',
            'employeeInfo',
            'qualifyingQuestions',
            'grossIncome',
            'form941',
            'form940',
            'statePayrollTaxes',
        ])

    def test_cells_are_unique_and_well_formed(self):
        cells = [row[0] for row in self.rows]
        self.assertEqual(len(cells), len(set(cells)))
        for cell in cells:
            with self.subTest(cell=cell):
                self.assertRegex(cell, re.compile(r'^[A-Z]+[0-9]+$'))

    def test_field_names_are_unique(self):
        field_names = [row[3] for row in self.rows]
        self.assertEqual(len(field_names), len(set(field_names)))

    def test_rows_use_known_types(self):
        for row in self.rows:
            with self.subTest(cell=row[0]):
                self.assertIn(len(row), (4, 5))
                MappingType(row[1])
                DataType(row[2])

    def test_data_value_count(self):
        data_values = [row for row in self.rows if row[1] == 'DATA_VALUE']
        self.assertEqual(len(data_values), 183)
        self.assertEqual(len(get_erc_template().list_data_value_mappings()), 183)

    def test_known_cells(self):
        registry = get_erc_template()
        expected = {
            'A2': ('filerRemarks', MappingType.DATA_VALUE, DataType.TEXT),
            'B31': ('gross_2019_q1', MappingType.DATA_VALUE, DataType.NUMBER),
            'B63': ('form941_2020_q1_employees', MappingType.DATA_VALUE, DataType.NUMBER),
            'K57': ('ercAmountClaimedLabel', MappingType.DATA_VALUE, DataType.TEXT),
            'C118': ('state_2020_q1_suiRate', MappingType.DATA_VALUE, DataType.PERCENTAGE),
            'B9': ('shutdown_q1_2020', MappingType.DATA_VALUE, DataType.BOOLEAN),
            'K30': ('gross_2019_label', MappingType.TEMPLATE_LABEL, DataType.TEXT),
        }
        for cell, (field_name, mapping_type, data_type) in expected.items():
            with self.subTest(cell=cell):
                mapping = registry.lookup_by_cell(cell)
                self.assertIsNotNone(mapping)
                self.assertEqual(mapping.field_name, field_name)
                self.assertIs(mapping.mapping_type, mapping_type)
                self.assertIs(mapping.data_type, data_type)

    def test_bounding_range(self):
        self.assertEqual(get_erc_template().bounding_range(), 'A1:L129')


if __name__ == '__main__':
    unittest.main()
