"""Tests for the financial-year command line report."""

from pathlib import Path

import pytest

from financial_year.cli import main
from financial_year.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """main() configures logging against the captured stderr; undo it."""
    reset_logging()
    yield
    reset_logging()


class TestPeriodTable:

    def test_calendar_year(self, capsys):
        assert main(["--type", "calendar", "--start", "2019-01-01"]) == 0

        out = capsys.readouterr().out
        assert "calendar financial year 2019-01-01 .. 2019-12-31 (12 periods)" in out
        assert "     2  2019-02-01  2019-02-28    28" in out
        assert "    12  2019-12-01  2019-12-31    31" in out

    def test_business_year_with_weeks(self, capsys):
        code = main(
            ["--type", "business", "--start", "2019-01-01", "--fifty-three-weeks", "--weeks"]
        )
        assert code == 0

        out = capsys.readouterr().out
        assert "(13 periods, 53 weeks)" in out
        assert "    13  2019-12-03  2020-01-06    35" in out
        assert "    53  2019-12-31  2020-01-06     7" in out

    def test_lookup(self, capsys):
        main(["--type", "business", "--start", "2019-01-01", "--lookup", "2019-01-31"])
        assert "2019-01-31: period 2, week 5" in capsys.readouterr().out

    def test_calendar_lookup_has_no_week(self, capsys):
        main(["--type", "calendar", "--start", "2019-01-01", "--lookup", "2019-02-07"])
        out = capsys.readouterr().out
        assert "2019-02-07: period 2\n" in out

    def test_named_definition(self, capsys, tmp_path: Path):
        path = tmp_path / "fy.yaml"
        path.write_text(
            "financial_years:\n"
            "  - name: shop\n"
            "    type: business\n"
            "    start_date: 2019-01-01\n"
        )
        assert main(["--name", "shop", "--config", str(path)]) == 0
        assert "business financial year 2019-01-01 .. 2019-12-30" in capsys.readouterr().out


class TestErrors:

    def test_disallowed_start(self, capsys):
        assert main(["--type", "calendar", "--start", "2019-01-30"]) == 1
        assert "ERROR: DISALLOWED_START_DATE:" in capsys.readouterr().err

    def test_lookup_out_of_range(self, capsys):
        code = main(["--type", "calendar", "--start", "2019-01-01", "--lookup", "2020-01-07"])
        assert code == 1
        assert "ERROR: DATE_OUT_OF_RANGE:" in capsys.readouterr().err

    def test_unknown_definition(self, capsys):
        assert main(["--name", "no-such-year"]) == 1
        assert "no-such-year" in capsys.readouterr().err

    def test_missing_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--type", "calendar"])
        assert exc_info.value.code == 2

    def test_unknown_type_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            main(["--type", "lunar", "--start", "2019-01-01"])

    def test_malformed_definitions_file(self, capsys, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("financial_years: [\n")
        assert main(["--name", "shop", "--config", str(path)]) == 1
        assert capsys.readouterr().err.startswith("ERROR: ")

    def test_duplicate_definition_names(self, capsys, tmp_path: Path):
        path = tmp_path / "dupes.yaml"
        path.write_text(
            "financial_years:\n"
            "  - name: shop\n"
            "    type: business\n"
            "    start_date: 2019-01-01\n"
            "  - name: shop\n"
            "    type: calendar\n"
            "    start_date: 2019-04-06\n"
        )
        assert main(["--name", "shop", "--config", str(path)]) == 1
        assert "Duplicate financial year definition: shop" in capsys.readouterr().err
