from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from dance_timeline.config import ChartConfig, get_output_dir, get_virtualdj_dir


def test_chart_config_defaults() -> None:
    config = ChartConfig()

    assert (config.width, config.height, config.label_offset) == (1000, 60, 200)
    assert config.range_start == datetime(2021, 1, 1)
    assert config.range_end == datetime(2026, 1, 1)
    assert config.evening_start == 19 * 3600
    assert config.evening_end == 22 * 3600
    assert config.palette[0] == "black"
    assert len(config.palette) == 9


def test_chart_config_for_years() -> None:
    config = ChartConfig.for_years(2019, 2024)
    assert config.range_start == datetime(2019, 1, 1)
    assert config.range_end == datetime(2024, 1, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"range_start": datetime(2026, 1, 1), "range_end": datetime(2021, 1, 1)},
        {"evening_start_hour": 22, "evening_end_hour": 19},
        {"palette": ()},
    ],
)
def test_chart_config_validation(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        ChartConfig(**kwargs)


def test_virtualdj_dir_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DANCE_TIMELINE_VIRTUALDJ_DIR", str(tmp_path))
    assert get_virtualdj_dir() == tmp_path.resolve()


def test_virtualdj_dir_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DANCE_TIMELINE_VIRTUALDJ_DIR", raising=False)
    assert get_virtualdj_dir() == Path.home() / "Documents" / "VirtualDJ"


def test_output_dir_defaults_to_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DANCE_TIMELINE_OUTPUT_DIR", raising=False)
    assert get_output_dir() == Path.cwd()
