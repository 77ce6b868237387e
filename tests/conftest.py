"""Shared pytest fixtures for the full normalign test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def mixed_script_text() -> str:
    """Provide text that exercises decomposition, composition, and reordering."""

    return "\uff28e\u0301llo  \ufb01\t\u5317\u4eac \u1100\u1161\u11a8 a\u0323\u0301 \u0130stanbul \u2126\u212b"


@pytest.fixture(autouse=True)
def _clear_normalign_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment-based config resolution deterministic across tests."""

    for key in ("NORMALIGN_CONFIG", "NORMALIGN_NORMALIZERS", "NORMALIGN_PRESET"):
        monkeypatch.delenv(key, raising=False)
