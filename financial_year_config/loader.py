"""
Configuration Loader (``financial_year_config.loader``).

Responsibility
--------------
Loads YAML documents declaring financial years and parses them into
typed ``financial_year_config.schema`` dataclass instances.  Callers
that want a ready calculator use ``financial_year_config.get_financial_year()``.

Architecture position
---------------------
**Config layer** -- sits above ``financial_year``.  The calculator never
imports from this package.

Invariants enforced
-------------------
* Missing required keys raise ``KeyError``; there are no silent defaults
  for ``name``, ``type`` or ``start_date``.
* Type literals and dates are validated with the calculator's own rules,
  so a definition that parses is one the calculator accepts as input.
* Definition names are unique within a document.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* Unknown type literal  -> ``UnsupportedYearTypeError``.
* Invalid date  -> ``InvalidDateError``.
* Duplicate names  -> ``ValueError``.
"""

from __future__ import annotations

import hashlib
import json
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from financial_year.domain.dates import to_date
from financial_year.domain.year_types import resolve_year_type
from financial_year_config.schema import FinancialYearDefinition, FinancialYearDocument

ROOT_KEY = "financial_years"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Preconditions:
        - ``path`` must point to an existing, readable YAML file.
    Postconditions:
        - Returns a ``dict`` (possibly empty if the YAML is empty).
    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_date(value: Any) -> date:
    """
    Parse a date from YAML.

    PyYAML already turns unquoted ``2019-01-01`` into a ``date``; quoted
    strings go through the same strict ISO parsing as calculator input.
    """
    return to_date(value)


def parse_definition(data: dict[str, Any]) -> FinancialYearDefinition:
    """
    Parse a ``FinancialYearDefinition`` from a dict.

    Raises:
        KeyError: if ``name``, ``type`` or ``start_date`` is missing.
        UnsupportedYearTypeError: if ``type`` is not a known literal.
        InvalidDateError: if ``start_date`` cannot be parsed.
    """
    return FinancialYearDefinition(
        name=str(data["name"]),
        year_type=resolve_year_type(data["type"]),
        start_date=parse_date(data["start_date"]),
        fifty_three_weeks=bool(data.get("fifty_three_weeks", False)),
        description=data.get("description", "") or "",
    )


def parse_document(data: dict[str, Any]) -> FinancialYearDocument:
    """
    Parse every definition under the ``financial_years`` key.

    Raises:
        ValueError: if two definitions share a name.
    """
    definitions = tuple(parse_definition(d) for d in data.get(ROOT_KEY, []) or [])

    seen: set[str] = set()
    for definition in definitions:
        if definition.name in seen:
            raise ValueError(f"Duplicate financial year definition: {definition.name}")
        seen.add(definition.name)

    return FinancialYearDocument(
        definitions=definitions,
        checksum=compute_checksum(data),
    )


def load_definitions(path: Path) -> FinancialYearDocument:
    """Load and parse a YAML file of financial year definitions."""
    return parse_document(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Postconditions:
        - Identical ``data`` always produces identical checksums
          (deterministic), regardless of key order.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
