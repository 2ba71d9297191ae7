"""
Shared test fixtures for the ERC sheets package.
"""
import pytest
from typing import Dict, Any

from erc_sheets.services.template_registry import TemplateRegistry, get_erc_template

TINY_SHEET_NAME = 'Tiny Sheet'

TINY_DEFINITION = {
    'company': [
        ('A1', 'HEADER', 'TEXT', 'companyHeader'),
        ('B2', 'DATA_VALUE', 'TEXT', 'companyName', 'Legal name'),
        ('C2', 'DATA_VALUE', 'BOOLEAN', 'isSeasonal'),
    ],
    'payroll': [
        ('A4', 'TEMPLATE_LABEL', 'TEXT', 'wagesLabel'),
        ('B4', 'DATA_VALUE', 'NUMBER', 'wages'),
        ('C4', 'DATA_VALUE', 'PERCENTAGE', 'taxRate'),
    ],
}


@pytest.fixture
def erc_template() -> TemplateRegistry:
    """The registry built from the real ERC worksheet mappings."""
    return get_erc_template()


@pytest.fixture
def tiny_template() -> TemplateRegistry:
    """
    A small two-section registry covering every data type.
    Bounding range is A1:C4.
    """
    return TemplateRegistry.from_definition(TINY_SHEET_NAME, TINY_DEFINITION)


@pytest.fixture
def sample_record() -> Dict[str, Any]:
    """
    Fixture providing a typed record for the ERC worksheet.
    This represents values a caller would extract or populate.
    """
    return {
        'filerRemarks': 'Filed for 2020 Q2 and Q3',
        'fullTimeW2Count2020': 42.0,
        'shutdown_q2_2020': True,
        'supply_q1_2020': False,
        'gross_2019_q1': 50000.0,
        'form941_2020_q1_employees': 38.0,
        'state_2020_q1_suiRate': 0.0625,
    }
