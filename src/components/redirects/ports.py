"""
Redirects component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for redirect rules configuration."""

    def is_enabled(self) -> bool:
        """Check if redirects are enabled."""
        ...

    def trace_enabled(self) -> bool:
        """Check if every constructed redirect should be logged."""
        ...

    def allowed_status_codes(self) -> list[int]:
        """Get the status codes a redirect target may use."""
        ...
