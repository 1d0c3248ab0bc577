import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


_FISHING_ENV = (
    "FISHING_DATABASE_URL",
    "FISHING_WORLD_SEED",
    "FISHING_TICK_MS",
    "FISHING_NO_BITE_RATIO",
    "FISHING_NO_BITE_WEIGHT",
    "FISHING_BITE_WINDOW_MS",
    "FISHING_BREAK_THRESHOLD",
)


@pytest.fixture(autouse=True)
def disable_sleep(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("time.sleep", lambda *_args, **_kwargs: None)


@pytest.fixture(autouse=True)
def clean_fishing_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _FISHING_ENV:
        monkeypatch.delenv(name, raising=False)
