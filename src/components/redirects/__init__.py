"""
Redirects component - redirect URL templating for redirect targets.
"""

from ._impl import (
    DEFAULT_CONFIG,
    PLACEHOLDER,
    RedirectBuilder,
    RedirectConfig,
    bind_redirect,
    build_redirect_url,
    create_redirect_builder,
    decoded_strip_path,
)
from .adapters.rules import RulesAdapter
from .component import run, run_build
from .models import BuildRedirectInput, RedirectError, RedirectUrlOutput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_build",
    # Input models
    "BuildRedirectInput",
    # Output models
    "RedirectError",
    "RedirectUrlOutput",
    # Ports and adapters
    "RulesAdapter",
    "RulesPort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "PLACEHOLDER",
    "RedirectBuilder",
    "RedirectConfig",
    "bind_redirect",
    "build_redirect_url",
    "create_redirect_builder",
    "decoded_strip_path",
]
