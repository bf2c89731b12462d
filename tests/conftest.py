from pathlib import Path
from typing import Any, Iterator

import pendulum
import pytest

from timetable import configuration
from timetable.layout.config import resolve_layout_config
from timetable.model.layout_config import LayoutConfig
from timetable.repository.configuration import CONFIGURATION_REPO


def at(day: int, hour: int = 0, minute: int = 0, month: int = 5) -> pendulum.DateTime:
    return pendulum.naive(2024, month, day, hour, minute)


def make_item(start: Any, end: Any, **extra: Any) -> dict[str, Any]:
    return {"startDate": start, "endDate": end, **extra}


@pytest.fixture
def config() -> LayoutConfig:
    # column_width resolves to 400 - (50 - 15) = 365
    return resolve_layout_config(400)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    config_path = tmp_path / "config.yaml"
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    CONFIGURATION_REPO.reset()
    yield config_path
    CONFIGURATION_REPO.reset()
