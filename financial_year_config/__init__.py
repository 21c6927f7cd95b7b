"""
financial_year_config -- declared financial years, loaded from YAML.

Responsibility:
    Turns named financial year definitions in a YAML file into ready
    ``FinancialYear`` calculators through ``get_financial_year()``.

Architecture position:
    Configuration -- sits above ``financial_year``.  The calculator MUST
    NEVER import from this package.

Invariants enforced:
    - Definitions are validated with the calculator's own rules while
      parsing, and again when the calculator is built.
    - No environment variables are read; the file path is explicit or the
      packaged default.

Failure modes:
    - ``FileNotFoundError`` -- the definitions file does not exist.
    - ``KeyError`` -- no definition with the requested name.
    - ``ConfigurationError`` / ``DomainError`` -- the definition is not a
      valid financial year.

Audit relevance:
    Every successful ``get_financial_year()`` call emits a
    ``FINANCIAL_YEAR_CONFIG_TRACE`` log entry with the definition name,
    type, derived start/end dates and the source file checksum.
    Records emitted while a named year is loaded carry ``financial_year``
    and ``year_type`` context fields.
"""

from __future__ import annotations

from pathlib import Path

from financial_year.domain.financial_year import FinancialYear
from financial_year.logging_config import LogContext, get_logger
from financial_year_config.loader import load_definitions
from financial_year_config.schema import FinancialYearDefinition, FinancialYearDocument

_logger = get_logger("config")

# Packaged example definitions
DEFAULT_CONFIG_FILE = Path(__file__).parent / "financial_years.yaml"


def build_financial_year(definition: FinancialYearDefinition) -> FinancialYear:
    """Build the calculator for one parsed definition."""
    return FinancialYear(
        definition.year_type,
        definition.start_date,
        definition.fifty_three_weeks,
    )


def get_financial_year(name: str, config_file: Path | None = None) -> FinancialYear:
    """
    Load the named financial year from a definitions file.

    Args:
        name: Definition name within the file.
        config_file: YAML file to read.  Defaults to the packaged
            ``financial_years.yaml``.

    Returns:
        A fully constructed ``FinancialYear``.

    Raises:
        FileNotFoundError: If ``config_file`` does not exist.
        KeyError: If no definition is named ``name``.
        ConfigurationError: If the definition is not a valid year setup.
    """
    path = config_file or DEFAULT_CONFIG_FILE

    with LogContext.bind(financial_year=name):
        document = load_definitions(path)
        definition = document.get(name)

        with LogContext.bind(year_type=definition.year_type.value):
            financial_year = build_financial_year(definition)

            _logger.info(
                "FINANCIAL_YEAR_CONFIG_TRACE",
                extra={
                    "trace_type": "FINANCIAL_YEAR_CONFIG_TRACE",
                    "definition_name": definition.name,
                    "start_date": financial_year.start_date,
                    "end_date": financial_year.end_date,
                    "weeks": financial_year.weeks,
                    "checksum": document.checksum,
                    "source": str(path),
                },
            )

    return financial_year


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "FinancialYearDefinition",
    "FinancialYearDocument",
    "build_financial_year",
    "get_financial_year",
    "load_definitions",
]
