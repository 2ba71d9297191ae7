import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from erc_sheets.constants.erc_template_mappings import ERC_TEMPLATE_MAPPINGS, SHEET_NAME
from erc_sheets.exceptions import TemplateSchemaError, UnknownFieldError
from erc_sheets.models.template import (
    CellMapping,
    CellWrite,
    DataType,
    ExtractionResult,
    FieldError,
    LayoutMismatch,
    MappingType,
    PopulationResult,
    RecordValidation,
    TemplateSection,
)
from erc_sheets.utils.cell_refs import bounding_range, cell_to_indices, is_valid_cell_ref, read_grid_value
from erc_sheets.utils.data_utils import format_cell_value, is_empty, matches_data_type, parse_cell_value

logger = logging.getLogger(__name__)

Grid = Sequence[Sequence[Any]]


def _build_sections(definition: Mapping[str, Iterable[Sequence[Any]]]) -> Tuple[List[TemplateSection], List[str]]:
    """Turn the nested mapping literal into sections, collecting bad rows."""
    sections = []
    problems = []
    for section_name, rows in definition.items():
        mappings = []
        for row in rows:
            if len(row) not in (4, 5):
                problems.append(f"Section {section_name}: malformed mapping row {row!r}")
                continue
            cell, mapping_type, data_type, field_name = row[:4]
            description = row[4] if len(row) == 5 else None
            try:
                mappings.append(CellMapping(
                    cell=cell,
                    mapping_type=MappingType(mapping_type),
                    data_type=DataType(data_type),
                    field_name=field_name,
                    description=description
                ))
            except ValueError as e:
                problems.append(f"Section {section_name}: cell {cell}: {e}")
        sections.append(TemplateSection(name=section_name, mappings=tuple(mappings)))
    return sections, problems


def _find_schema_problems(sheet_name: str, sections: Sequence[TemplateSection]) -> List[str]:
    """Check the cell, field and section invariants of a template."""
    problems = []
    if not sheet_name:
        problems.append("Sheet name is required")

    section_names = set()
    cells: Dict[str, str] = {}
    field_names: Dict[str, str] = {}
    for section in sections:
        if section.name in section_names:
            problems.append(f"Duplicate section name: {section.name}")
        section_names.add(section.name)

        for mapping in section.mappings:
            if not is_valid_cell_ref(mapping.cell):
                problems.append(f"Section {section.name}: invalid cell reference {mapping.cell!r}")
            elif mapping.cell in cells:
                problems.append(
                    f"Duplicate cell {mapping.cell} in sections {cells[mapping.cell]} and {section.name}"
                )
            else:
                cells[mapping.cell] = section.name

            if not mapping.field_name:
                problems.append(f"Section {section.name}: cell {mapping.cell} has no field name")
            elif mapping.field_name in field_names:
                problems.append(
                    f"Duplicate field name {mapping.field_name} in sections "
                    f"{field_names[mapping.field_name]} and {section.name}"
                )
            else:
                field_names[mapping.field_name] = section.name

            if not isinstance(mapping.mapping_type, MappingType):
                problems.append(f"Section {section.name}: cell {mapping.cell} has invalid mapping type")
            if not isinstance(mapping.data_type, DataType):
                problems.append(f"Section {section.name}: cell {mapping.cell} has invalid data type")
    return problems


def _normalize_caption(value: Any) -> str:
    return ' '.join(str(value).split()).casefold()


class TemplateRegistry:
    """Cell-to-field schema of one worksheet layout.

    The registry is validated when it is built and never changes afterwards,
    so one instance can be shared freely. Extraction turns a grid of raw
    cell values into typed fields; population turns typed fields back into
    cell writes.
    """

    def __init__(self, sheet_name: str, sections: Sequence[TemplateSection]):
        problems = _find_schema_problems(sheet_name, sections)
        if problems:
            logger.error(f"[TemplateRegistry] Schema for '{sheet_name}' is invalid: {problems}")
            raise TemplateSchemaError(problems)

        self._sheet_name = sheet_name
        self._sections = tuple(sections)
        self._sections_by_name = {section.name: section for section in self._sections}
        self._by_cell: Dict[str, CellMapping] = {}
        self._by_field: Dict[str, CellMapping] = {}
        self._section_of_field: Dict[str, str] = {}
        for section in self._sections:
            for mapping in section.mappings:
                self._by_cell[mapping.cell] = mapping
                self._by_field[mapping.field_name] = mapping
                self._section_of_field[mapping.field_name] = section.name
        self._data_value_mappings = tuple(
            mapping for section in self._sections for mapping in section.mappings
            if mapping.is_data_value
        )
        logger.info(
            f"[TemplateRegistry] Loaded '{sheet_name}': {len(self._sections)} sections, "
            f"{len(self._by_cell)} cells, {len(self._data_value_mappings)} data values"
        )

    @classmethod
    def from_definition(cls, sheet_name: str, definition: Mapping[str, Iterable[Sequence[Any]]]) -> 'TemplateRegistry':
        """Build a registry from a {section name: [mapping rows]} literal.

        Each row is (cell, mapping type, data type, field name[, description])
        with the enum values spelled as strings.

        Raises:
            TemplateSchemaError: listing every problem found in the definition.
        """
        sections, problems = _build_sections(definition)
        problems.extend(_find_schema_problems(sheet_name, sections))
        if problems:
            logger.error(f"[TemplateRegistry] Definition for '{sheet_name}' is invalid: {problems}")
            raise TemplateSchemaError(problems)
        return cls(sheet_name, sections)

    @property
    def sheet_name(self) -> str:
        return self._sheet_name

    @property
    def sections(self) -> Tuple[TemplateSection, ...]:
        return self._sections

    def list_sections(self) -> List[str]:
        return [section.name for section in self._sections]

    def lookup_by_cell(self, cell: str) -> Optional[CellMapping]:
        """Return the mapping for an exact, case-sensitive cell reference, or None."""
        if not isinstance(cell, str):
            return None
        return self._by_cell.get(cell)

    def lookup_by_field_name(self, field_name: str) -> Optional[CellMapping]:
        if not isinstance(field_name, str):
            return None
        return self._by_field.get(field_name)

    def section_of(self, field_name: str) -> Optional[str]:
        return self._section_of_field.get(field_name)

    def list_data_value_mappings(self) -> List[CellMapping]:
        """All DATA_VALUE mappings in section-then-declaration order."""
        return list(self._data_value_mappings)

    def list_section_mappings(self, section_name: str) -> List[CellMapping]:
        """Mappings of one section in declared order; empty for an unknown name."""
        section = self._sections_by_name.get(section_name)
        return list(section.mappings) if section else []

    def qualified_range(self, a1_range: str) -> str:
        """Prefix a cell or range with the quoted sheet name."""
        return f"'{self._sheet_name}'!{a1_range}"

    def bounding_range(self) -> str:
        """The A1-anchored range covering every mapped cell."""
        return bounding_range(self._by_cell)

    def extract(self, grid: Grid, origin: str = 'A1') -> ExtractionResult:
        """
        Read every DATA_VALUE field from a grid of raw cell values.

        Args:
            grid: Rows of raw values as returned by a range read.
            origin: The sheet cell that grid[0][0] holds (default 'A1').

        Returns:
            ExtractionResult with the typed values of non-empty cells and one
            FieldError per cell that could not be parsed.
        """
        return self._extract_mappings(self._data_value_mappings, grid, origin)

    def extract_sections(self, grid: Grid, section_names: Iterable[str], origin: str = 'A1') -> ExtractionResult:
        """Like extract, limited to the DATA_VALUE fields of the named sections."""
        wanted = set(section_names)
        mappings = [
            mapping for section in self._sections if section.name in wanted
            for mapping in section.mappings if mapping.is_data_value
        ]
        return self._extract_mappings(mappings, grid, origin)

    def _extract_mappings(self, mappings: Sequence[CellMapping], grid: Grid, origin: str) -> ExtractionResult:
        # Validates the origin before any cell is read
        cell_to_indices(origin)
        result = ExtractionResult()
        for mapping in mappings:
            raw = read_grid_value(grid, mapping.cell, origin)
            if is_empty(raw):
                continue
            try:
                result.values[mapping.field_name] = parse_cell_value(raw, mapping.data_type)
            except (TypeError, ValueError) as e:
                logger.warning(f"[extract] {mapping.field_name} ({mapping.cell}): {e}")
                result.errors.append(FieldError(
                    field_name=mapping.field_name,
                    cell=mapping.cell,
                    raw_value=raw,
                    message=str(e)
                ))
        logger.info(
            f"[extract] Extracted {len(result.values)} of {len(mappings)} fields "
            f"with {len(result.errors)} error(s)"
        )
        return result

    def populate(self, record: Mapping[str, Any]) -> PopulationResult:
        """
        Turn a {field name: value} record into cell writes.

        Only fields present in the record are written. None or '' writes an
        empty string, which blanks the cell.

        Raises:
            UnknownFieldError: if the record names anything other than
                DATA_VALUE fields of this template.
        """
        unknown = [
            name for name in record
            if name not in self._by_field or not self._by_field[name].is_data_value
        ]
        if unknown:
            logger.error(f"[populate] Record has unknown fields: {unknown}")
            raise UnknownFieldError(unknown)

        result = PopulationResult()
        for mapping in self._data_value_mappings:
            if mapping.field_name in record:
                self._append_write(result, mapping, record[mapping.field_name])
        logger.info(
            f"[populate] Prepared {len(result.writes)} write(s) with {len(result.errors)} error(s)"
        )
        return result

    def render_labels(self, captions: Mapping[str, str]) -> PopulationResult:
        """
        Turn {field name: caption} for label and header cells into cell writes.

        Raises:
            UnknownFieldError: if a name is not a TEMPLATE_LABEL or HEADER field.
        """
        unknown = [
            name for name in captions
            if name not in self._by_field or self._by_field[name].is_data_value
        ]
        if unknown:
            raise UnknownFieldError(unknown)

        result = PopulationResult()
        for section in self._sections:
            for mapping in section.mappings:
                if not mapping.is_data_value and mapping.field_name in captions:
                    self._append_write(result, mapping, captions[mapping.field_name])
        return result

    @staticmethod
    def _append_write(result: PopulationResult, mapping: CellMapping, value: Any) -> None:
        if value is None or (isinstance(value, str) and value == ''):
            result.writes.append(CellWrite(mapping.cell, ''))
            return
        try:
            result.writes.append(CellWrite(mapping.cell, format_cell_value(value, mapping.data_type)))
        except (TypeError, ValueError) as e:
            logger.warning(f"[populate] {mapping.field_name} ({mapping.cell}): {e}")
            result.errors.append(FieldError(
                field_name=mapping.field_name,
                cell=mapping.cell,
                raw_value=value,
                message=str(e)
            ))

    def summarize(self, record: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
        """Group the DATA_VALUE fields of a record by section, skipping empty sections."""
        summary = {}
        for section in self._sections:
            values = {
                mapping.field_name: record[mapping.field_name]
                for mapping in section.mappings
                if mapping.is_data_value and record.get(mapping.field_name) is not None
            }
            if values:
                summary[section.name] = values
        return summary

    def validate_record(self, record: Mapping[str, Any]) -> RecordValidation:
        """Check a record for missing, mistyped and unknown fields."""
        validation = RecordValidation()
        for mapping in self._data_value_mappings:
            value = record.get(mapping.field_name)
            if value is None or value == '':
                validation.missing_fields.append(f"{mapping.field_name} ({mapping.cell})")
            elif not matches_data_type(value, mapping.data_type):
                validation.invalid_fields.append(
                    f"{mapping.field_name} ({mapping.cell}) - expected "
                    f"{mapping.data_type.value.lower()}, got {type(value).__name__}"
                )
        validation.unknown_fields = [
            name for name in record
            if name not in self._by_field or not self._by_field[name].is_data_value
        ]
        validation.is_valid = not (
            validation.missing_fields or validation.invalid_fields or validation.unknown_fields
        )
        return validation

    def check_layout(self, grid: Grid, expected_captions: Mapping[str, str], origin: str = 'A1') -> List[LayoutMismatch]:
        """
        Compare label and header cells of a grid with their expected captions.

        Comparison ignores case and collapses whitespace. Label fields not
        named in ``expected_captions`` are not checked; a named cell that is
        empty is reported with ``actual=None``.

        Raises:
            UnknownFieldError: if a name is not a TEMPLATE_LABEL or HEADER field.
        """
        unknown = [
            name for name in expected_captions
            if name not in self._by_field or self._by_field[name].is_data_value
        ]
        if unknown:
            raise UnknownFieldError(unknown)

        cell_to_indices(origin)
        mismatches = []
        for section in self._sections:
            for mapping in section.mappings:
                if mapping.is_data_value or mapping.field_name not in expected_captions:
                    continue
                expected = expected_captions[mapping.field_name]
                raw = read_grid_value(grid, mapping.cell, origin)
                actual = None if is_empty(raw) else str(raw).strip()
                if actual is None or _normalize_caption(actual) != _normalize_caption(expected):
                    mismatches.append(LayoutMismatch(
                        cell=mapping.cell,
                        field_name=mapping.field_name,
                        expected=expected,
                        actual=actual
                    ))
        if mismatches:
            logger.warning(f"[check_layout] {len(mismatches)} label cell(s) differ from the template")
        return mismatches


@lru_cache(maxsize=None)
def get_erc_template() -> TemplateRegistry:
    """The shared registry for the ERC worksheet template."""
    return TemplateRegistry.from_definition(SHEET_NAME, ERC_TEMPLATE_MAPPINGS)
