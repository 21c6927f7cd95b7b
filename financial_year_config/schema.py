"""
Financial year definition schema.

Defines the human-authored, reviewable source artifact for a financial
year.  YAML documents are parsed into these types by the loader and turned
into ``FinancialYear`` calculators by ``financial_year_config``.

Key distinction:
  FinancialYearDefinition = source artifact (declarative data, no logic)
  FinancialYear           = runtime calculator (validated, derives dates)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from financial_year.domain.year_types import FinancialYearType


@dataclass(frozen=True)
class FinancialYearDefinition:
    """One named financial year as declared in configuration."""

    name: str
    year_type: FinancialYearType
    start_date: date
    fifty_three_weeks: bool = False
    description: str = ""


@dataclass(frozen=True)
class FinancialYearDocument:
    """All definitions from one YAML file plus the file's checksum."""

    definitions: tuple[FinancialYearDefinition, ...]
    checksum: str

    def get(self, name: str) -> FinancialYearDefinition:
        """Look up a definition by name; KeyError if absent."""
        for definition in self.definitions:
            if definition.name == name:
                return definition
        raise KeyError(f"No financial year definition named {name!r}")

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(d.name for d in self.definitions)
