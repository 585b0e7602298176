from __future__ import annotations

from pathlib import Path

import pytest

from ridegraph.config import reset_config
from ridegraph.container import reset_container
from ridegraph.domain.models import Category, TripRecord

P = Category.PERSONAL
B = Category.BUSINESS

RIDES_HEADER = "START_DATE,END_DATE,CATEGORY,START,STOP,MILES,PURPOSE"


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def rides():
    """A -> B twice (personal), B -> C and C -> D (business)."""
    return [
        TripRecord("A", "B", P),
        TripRecord("A", "B", P),
        TripRecord("B", "C", B),
        TripRecord("C", "D", B),
    ]


@pytest.fixture
def cycle():
    return [
        TripRecord("A", "B", P),
        TripRecord("B", "C", P),
        TripRecord("C", "A", P),
    ]


@pytest.fixture
def rides_csv(tmp_path: Path) -> Path:
    rows = [
        RIDES_HEADER,
        "01-01-2016 21:11,01-01-2016 21:17,Business,Fort Pierce,Fort Pierce,5.1,Meal/Entertain",
        "01-02-2016 01:25,01-02-2016 01:37,Business,Fort Pierce,West Palm Beach,5,",
        "01-02-2016 20:25,01-02-2016 20:38,Business,Fort Pierce,West Palm Beach,4.8,Errand/Supplies",
        "01-05-2016 17:31,01-05-2016 17:45,Personal,West Palm Beach,Cary,4.7,Meeting",
        "01-06-2016 14:42,01-06-2016 15:49,Business,Unknown Location,Cary,63.7,Customer Visit",
        "01-06-2016 17:15,01-06-2016 17:19,Personal,Cary,,4.3,Meal/Entertain",
        "Totals,,",
    ]
    path = tmp_path / "rides.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path
