"""ERC template data models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Tuple


class MappingType(Enum):
    """What a mapped cell holds on the worksheet."""
    TEMPLATE_LABEL = "TEMPLATE_LABEL"
    DATA_VALUE = "DATA_VALUE"
    HEADER = "HEADER"


class DataType(Enum):
    """How a cell's raw value is parsed and formatted."""
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    PERCENTAGE = "PERCENTAGE"


@dataclass(frozen=True)
class CellMapping:
    """One worksheet cell and the field it carries."""
    cell: str
    mapping_type: MappingType
    data_type: DataType
    field_name: str
    description: Optional[str] = None

    @property
    def is_data_value(self) -> bool:
        return self.mapping_type is MappingType.DATA_VALUE

    def to_dict(self):
        """Convert CellMapping to a dictionary for JSON serialization."""
        return {
            'cell': self.cell,
            'mapping_type': self.mapping_type.value,
            'data_type': self.data_type.value,
            'field_name': self.field_name,
            'description': self.description
        }


@dataclass(frozen=True)
class TemplateSection:
    """A named, ordered group of cell mappings."""
    name: str
    mappings: Tuple[CellMapping, ...] = ()


class CellWrite(NamedTuple):
    """A single value to write to a worksheet cell."""
    cell: str
    value: Any


@dataclass
class FieldError:
    """A field whose value could not be parsed or formatted."""
    field_name: str
    cell: str
    raw_value: Any
    message: str

    def to_dict(self):
        return {
            'field_name': self.field_name,
            'cell': self.cell,
            'raw_value': self.raw_value,
            'message': self.message
        }


@dataclass
class ExtractionResult:
    """Typed field values read from a worksheet grid.

    Fields whose cell is empty or unparsable are left out of ``values``;
    unparsable ones are reported in ``errors``.
    """
    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self):
        return {
            'values': dict(self.values),
            'errors': [error.to_dict() for error in self.errors]
        }


@dataclass
class PopulationResult:
    """Cell writes produced from a record, in template order."""
    writes: List[CellWrite] = field(default_factory=list)
    errors: List[FieldError] = field(default_factory=list)
    # Set once the writes have been sent to a sheet
    updated_cells: int = 0

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self):
        return {
            'writes': [{'cell': write.cell, 'value': write.value} for write in self.writes],
            'errors': [error.to_dict() for error in self.errors]
        }


@dataclass
class RecordValidation:
    """Completeness and type check of a record against the template."""
    is_valid: bool = True
    missing_fields: List[str] = field(default_factory=list)
    invalid_fields: List[str] = field(default_factory=list)
    unknown_fields: List[str] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        messages = [f"Missing value: {name}" for name in self.missing_fields]
        messages.extend(f"Invalid value: {name}" for name in self.invalid_fields)
        messages.extend(f"Unknown field: {name}" for name in self.unknown_fields)
        return messages


@dataclass
class LayoutMismatch:
    """A label or header cell whose caption differs from the expected one."""
    cell: str
    field_name: str
    expected: str
    actual: Optional[str]
