"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from config.analysis_config import AnalysisConfig
from processing.table_models import LoadCaseRecord, RawTable


# ---------------------------------------------------------------------------
# Table Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_headers() -> list[str]:
    """Headers as returned by the extraction model for a typical load table."""
    return ["load_case", "C_V_kips", "C_T_kips", "C_L_kips", "SW_V_kips", "SW_T_kips", "SW_L_kips", "wind_psf"]


@pytest.fixture
def sample_field_mapping() -> dict[str, str]:
    """Field mapping that matches sample_headers."""
    return {
        "load_case": "load_case",
        "c_v": "C_V_kips",
        "c_t": "C_T_kips",
        "c_l": "C_L_kips",
        "sw_v": "SW_V_kips",
        "sw_t": "SW_T_kips",
        "sw_l": "SW_L_kips",
        "wind_psf": "wind_psf",
    }


@pytest.fixture
def sample_table(sample_headers) -> RawTable:
    """Three-row primary table with one blank-label row."""
    rows = [
        ["NESC Heavy", 2.5, 1.2, 0, 1.5, 0.8, 0, 4],
        ["Rule B w/ OLF", 3, 2, 0.5, 2, 1, 0.25, 9],
        ["", 9, 9, 9, 9, 9, 9, 9],
        ["ASCE Extreme Wind", 1, 4, 0, 0.5, 3, 0, 30],
    ]
    return RawTable(
        headers=list(sample_headers),
        rows=[dict(zip(sample_headers, row)) for row in rows],
    )


@pytest.fixture
def single_shield_record() -> LoadCaseRecord:
    """One load case carrying only shield wire forces."""
    return LoadCaseRecord(label="1. NESC Rule 250B", sw_v=2, sw_t=1, sw_l=0)


@pytest.fixture
def shield_only_config() -> AnalysisConfig:
    return AnalysisConfig(num_shields=1, num_conductors=0)


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_progress_callback() -> MagicMock:
    """Create a mock progress callback for testing writers."""
    return MagicMock()


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write a CSV file into tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
