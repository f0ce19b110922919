import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("LABYRINTH_WIDTH", "LABYRINTH_HEIGHT", "LABYRINTH_SEED", "LABYRINTH_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
