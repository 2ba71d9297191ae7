"""Exceptions raised by the ERC template registry."""
from typing import Iterable, List


class TemplateSchemaError(ValueError):
    """The template definition violates a schema invariant."""

    def __init__(self, problems: Iterable[str]):
        self.problems: List[str] = list(problems)
        super().__init__(
            f"Invalid template schema ({len(self.problems)} problem(s)): "
            + "; ".join(self.problems)
        )


class UnknownFieldError(KeyError):
    """A record names fields that the template does not declare."""

    def __init__(self, field_names: Iterable[str]):
        self.field_names: List[str] = sorted(field_names)
        super().__init__(f"Unknown template field(s): {', '.join(self.field_names)}")

    def __str__(self):
        # KeyError quotes its argument otherwise
        return self.args[0]


class InvalidCellReferenceError(ValueError):
    """A cell reference is not in A1 notation."""


class WorkbookReadError(ValueError):
    """An Excel workbook cannot be read as the template worksheet."""
