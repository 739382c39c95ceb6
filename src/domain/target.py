"""
Target record - one candidate destination of a route.

Only ``url`` and ``strip_path`` matter to redirect construction. The other
fields belong to the route loader, the weighting, metrics and access-rule
subsystems and are carried here untouched.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.url import URL, URLParseError, parse_url


class TargetConfigError(ValueError):
    """Raised when a target cannot be built from its route options."""


@dataclass
class Target:
    """A service instance (or redirect template) a route can resolve to."""

    # Service is the name of the service the url points to
    service: str
    url: URL
    tags: list[str] = field(default_factory=list)
    # Raw route options, e.g. {"strip": "/api", "redirect": "301"}
    opts: dict[str, str] = field(default_factory=dict)
    # Prefix removed from the request path, as written in the route options
    strip_path: str = ""
    tls_skip_verify: bool = False
    # Host header mode; "dst" sends the target host upstream
    host: str = ""
    # > 0 means clients are redirected to the target instead of proxied
    redirect_code: int = 0
    # Per-request redirect URL; only set on copies made by with_redirect()
    redirect_url: URL | None = None
    fixed_weight: float = 0.0
    weight: float = 0.0
    timer: Any = None
    timer_name: str = ""
    access_rules: dict[str, list[Any]] = field(default_factory=dict)

    @property
    def is_redirect(self) -> bool:
        return self.redirect_code > 0

    def with_redirect(self, redirect_url: URL) -> Target:
        """Return a copy of this target carrying ``redirect_url``."""
        return dataclasses.replace(self, redirect_url=redirect_url)


def _timer_name(service: str, url: URL) -> str:
    host = url.host.replace(".", "_").replace(":", "_")
    path = url.path.strip("/").replace("/", "_").replace(".", "_")
    return ".".join(part for part in (service, host, path) if part)


def _redirect_code(value: str, allowed_status_codes: Collection[int] | None) -> int:
    try:
        code = int(value)
    except ValueError as e:
        raise TargetConfigError(f"redirect status code must be an integer, got {value!r}") from e
    if not 300 <= code <= 399:
        raise TargetConfigError(f"redirect status code must be in the 3xx range, got {code}")
    if allowed_status_codes is not None and code not in allowed_status_codes:
        raise TargetConfigError(f"redirect status code {code} is not allowed")
    return code


def new_target(
    service: str,
    dst: str,
    opts: Mapping[str, str] | None = None,
    tags: list[str] | None = None,
    *,
    allowed_status_codes: Collection[int] | None = None,
) -> Target:
    """
    Build a target from a route destination and its options.

    Recognized options: ``strip``, ``host``, ``tlsskipverify`` and
    ``redirect`` (a 3xx status code).

    Raises:
        TargetConfigError: If ``dst`` does not parse or ``redirect`` is invalid.
    """
    options = dict(opts or {})
    try:
        url = parse_url(dst)
    except URLParseError as e:
        raise TargetConfigError(f"invalid destination {dst!r}: {e}") from e

    redirect_code = 0
    if "redirect" in options:
        redirect_code = _redirect_code(options["redirect"], allowed_status_codes)

    return Target(
        service=service,
        url=url,
        tags=list(tags or []),
        opts=options,
        strip_path=options.get("strip", ""),
        tls_skip_verify=options.get("tlsskipverify") == "true",
        host=options.get("host", ""),
        redirect_code=redirect_code,
        timer_name=_timer_name(service, url),
    )
