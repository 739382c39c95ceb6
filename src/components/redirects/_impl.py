"""
Redirect URL builder.

Turns a target template such as ``http://bar.com/$path`` plus an incoming
request URL into the absolute URL the client is redirected to.

Key behaviors:
- ``$path`` may sit in the template host, path or raw path
- Decoded ``path`` and encoded ``raw_path`` are rewritten in lock-step
- Only the first ``$path`` is substituted
- ``strip`` is matched decoded against ``path`` and raw against ``raw_path``
- The template query wins over the request query
- The target is never modified; the URL is returned
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.target import Target
from src.domain.url import URL, URLParseError, parse_url

logger = logging.getLogger(__name__)

PLACEHOLDER = "$path"


@dataclass(frozen=True)
class RedirectConfig:
    """Redirect configuration from rules."""

    enabled: bool = True
    trace: bool = False
    # None allows any 3xx code
    allowed_status_codes: tuple[int, ...] | None = None


DEFAULT_CONFIG = RedirectConfig()


def decoded_strip_path(strip_path: str) -> str:
    """Decoded form of a strip prefix; empty when it does not parse."""
    try:
        return parse_url(strip_path).path
    except URLParseError:
        return ""


def build_redirect_url(target: Target, request_url: URL) -> URL:
    """
    Build the redirect URL for ``request_url`` from ``target.url``.

    Reads only ``target.url`` and ``target.strip_path``, and only the path,
    raw path and query of ``request_url``.
    """
    template = target.url
    host = template.host
    path = template.path
    raw_path = template.raw_path
    raw_query = template.raw_query

    # http://bar.com$path behaves like http://bar.com/$path; runs before the
    # raw path carry-over so an encoded request keeps its raw path
    if host.endswith(PLACEHOLDER):
        host = host[: -len(PLACEHOLDER)]
        path = PLACEHOLDER

    if not raw_path and request_url.raw_path:
        raw_path = path
    has_raw = bool(raw_path)

    # the request path brings its own leading slash
    path = path.replace("/" + PLACEHOLDER, PLACEHOLDER, 1)
    raw_path = raw_path.replace("/" + PLACEHOLDER, PLACEHOLDER, 1)

    if PLACEHOLDER in path:
        path = path.replace(PLACEHOLDER, request_url.path, 1)
        if target.strip_path:
            prefix = decoded_strip_path(target.strip_path)
            if path.startswith(prefix):
                path = path[len(prefix):]
        if not raw_query and request_url.raw_query:
            raw_query = request_url.raw_query

    if PLACEHOLDER in raw_path:
        raw_path = raw_path.replace(PLACEHOLDER, request_url.raw_path or request_url.path, 1)
        if target.strip_path and raw_path.startswith(target.strip_path):
            raw_path = raw_path[len(target.strip_path):]

    if not path:
        path = "/"
    if has_raw and not raw_path:
        raw_path = "/"

    redirect_url = URL(
        scheme=template.scheme,
        host=host,
        path=path,
        raw_path=raw_path,
        raw_query=raw_query,
    )
    logger.debug(
        "Redirect for %s: template=%s request_path=%s request_raw_path=%s -> %s",
        target.service,
        template,
        request_url.path,
        request_url.raw_path,
        redirect_url,
    )
    return redirect_url


def bind_redirect(target: Target, request_url: URL) -> Target:
    """
    Return a per-request copy of ``target`` holding its redirect URL.

    The shared target stays untouched, so concurrent requests against the
    same route never see each other's redirect.
    """
    return target.with_redirect(build_redirect_url(target, request_url))


class RedirectBuilder:
    """
    Redirect builder bound to a configuration.

    Stateless apart from the configuration; safe to share across requests.
    """

    def __init__(self, config: RedirectConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RedirectConfig:
        return self._config

    def build(self, target: Target, request_url: URL) -> URL:
        """Build the redirect URL, logging it when tracing is enabled."""
        redirect_url = build_redirect_url(target, request_url)
        if self._config.trace:
            logger.info(
                "Redirect %s: %s (strip=%r) + %s -> %s",
                target.service,
                target.url,
                target.strip_path,
                request_url,
                redirect_url,
            )
        return redirect_url


def create_redirect_builder(config: RedirectConfig | None = None) -> RedirectBuilder:
    """Create a RedirectBuilder."""
    return RedirectBuilder(config=config)
