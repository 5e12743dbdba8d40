from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer environment variables and ``.env`` files out of the tests."""

    monkeypatch.chdir(tmp_path)
    for name in (
        "TERMCASE_API_KEY",
        "TERMCASE_BASE_URL",
        "TERMCASE_MODEL",
        "TERMCASE_TIMEOUT_SECONDS",
        "TERMCASE_TEMPERATURE",
    ):
        monkeypatch.delenv(name, raising=False)
