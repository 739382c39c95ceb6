"""
Redirects component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.target import Target
from src.domain.url import URL

# --- Error ---


@dataclass(frozen=True)
class RedirectError:
    """Reason a redirect could not be built."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class BuildRedirectInput:
    """Input for building the redirect URL of one request."""

    target: Target
    request_url: URL | str


# --- Output Models ---


@dataclass(frozen=True)
class RedirectUrlOutput:
    """Output of a redirect build."""

    redirect_url: URL | None
    location: str | None = None
    status_code: int | None = None
    errors: list[RedirectError] = field(default_factory=list)
    success: bool = True
