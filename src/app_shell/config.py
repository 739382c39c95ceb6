import logging
from collections.abc import Mapping
from pathlib import Path

from src.components.redirects import RulesAdapter, RulesPort
from src.domain.target import Target, new_target
from src.rules.loader import load_rules
from src.rules.models import LoggingRules, Rules

logger = logging.getLogger(__name__)


def configure_logging(rules: LoggingRules) -> None:
    """
    Apply the logging section of the rules.
    Raises ValueError for an unknown level name.
    """
    level = logging.getLevelName(rules.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {rules.level}")

    logging.basicConfig(level=level, format=rules.format)


def load_config(path: Path | None = None) -> tuple[Rules, RulesAdapter]:
    """
    Load rules, configure logging and return the redirects rules port.
    """
    rules = load_rules(path)
    configure_logging(rules.logging)
    logger.info(
        "Rules loaded (redirects enabled=%s, trace=%s)",
        rules.redirects.enabled,
        rules.redirects.trace,
    )
    return rules, RulesAdapter(rules.redirects)


def build_target(
    rules: RulesPort,
    service: str,
    dst: str,
    opts: Mapping[str, str] | None = None,
    tags: list[str] | None = None,
) -> Target:
    """
    Build a target with its redirect code restricted to the configured codes.
    Raises TargetConfigError for a destination or code the rules reject.
    """
    return new_target(
        service,
        dst,
        opts,
        tags,
        allowed_status_codes=rules.allowed_status_codes(),
    )
