"""
Redirects component - redirect URL construction for redirect targets.

Invariants:
- I1: The shared target is never modified
- I2: The redirect path is never empty
- I3: A raw path on the template or request yields a raw path on the result
- I4: The template query takes precedence over the request query
"""

from __future__ import annotations

from src.domain.url import URL, URLParseError, parse_request_uri

from ._impl import RedirectBuilder, RedirectConfig
from .models import BuildRedirectInput, RedirectError, RedirectUrlOutput
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> RedirectConfig:
    """Build redirect config from rules port."""
    if rules is None:
        return RedirectConfig()

    return RedirectConfig(
        enabled=rules.is_enabled(),
        trace=rules.trace_enabled(),
        allowed_status_codes=tuple(rules.allowed_status_codes()),
    )


def _failure(code: str, message: str, field: str | None = None) -> RedirectUrlOutput:
    return RedirectUrlOutput(
        redirect_url=None,
        errors=[RedirectError(code=code, message=message, field=field)],
        success=False,
    )


# --- Component Entry Points ---


def run_build(
    inp: BuildRedirectInput,
    *,
    rules: RulesPort | None = None,
) -> RedirectUrlOutput:
    """
    Build the redirect URL for one request.

    Args:
        inp: Input containing the matched target and the request URL.
        rules: Optional rules port for configuration.

    Returns:
        RedirectUrlOutput with the redirect URL and Location value, or errors.
    """
    config = _build_config(rules)
    if not config.enabled:
        return _failure("redirects_disabled", "Redirects are disabled")

    target = inp.target
    if not target.is_redirect:
        return _failure(
            "not_a_redirect_target",
            f"Target for service '{target.service}' has no redirect status code",
            field="target",
        )
    if (
        config.allowed_status_codes is not None
        and target.redirect_code not in config.allowed_status_codes
    ):
        return _failure(
            "status_code_not_allowed",
            f"Redirect status code {target.redirect_code} is not allowed",
            field="target",
        )

    request_url: URL
    if isinstance(inp.request_url, str):
        try:
            request_url = parse_request_uri(inp.request_url)
        except URLParseError as e:
            return _failure("invalid_request_url", str(e), field="request_url")
    else:
        request_url = inp.request_url

    redirect_url = RedirectBuilder(config).build(target, request_url)

    return RedirectUrlOutput(
        redirect_url=redirect_url,
        location=str(redirect_url),
        status_code=target.redirect_code,
        errors=[],
        success=True,
    )


def run(
    inp: BuildRedirectInput,
    *,
    rules: RulesPort | None = None,
) -> RedirectUrlOutput:
    """
    Main entry point for the redirects component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, BuildRedirectInput):
        return run_build(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
