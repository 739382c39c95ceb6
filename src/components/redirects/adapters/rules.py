"""
Rules adapter for the redirects component.
"""

from __future__ import annotations

from src.rules.models import RedirectRules


class RulesAdapter:
    """Expose the ``redirects`` section of rules.yaml as a RulesPort."""

    def __init__(self, rules: RedirectRules) -> None:
        self._rules = rules

    def is_enabled(self) -> bool:
        return self._rules.enabled

    def trace_enabled(self) -> bool:
        return self._rules.trace

    def allowed_status_codes(self) -> list[int]:
        return list(self._rules.allowed_status_codes)
