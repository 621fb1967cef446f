import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

SHARECART_ENV = (
    "SHARECART_CONFIG",
    "SHARECART_STRICT",
    "SHARECART_IMPLICIT_MAIN",
    "SHARECART_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer's shell settings must not change parser behaviour under test
    for name in SHARECART_ENV:
        monkeypatch.delenv(name, raising=False)
