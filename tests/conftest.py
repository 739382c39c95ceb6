from pathlib import Path

import pytest

from src.domain.target import Target, new_target
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """Rules loaded from the real rules.yaml at the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def make_target():
    """
    Factory for redirect targets, as the route loader would build them from
    ``route add svc / <dst> opts "strip=<prefix>"``.
    """

    def _make(dst: str, strip: str | None = None, redirect: str = "301") -> Target:
        opts = {"redirect": redirect}
        if strip is not None:
            opts["strip"] = strip
        return new_target("svc", dst, opts)

    return _make
