import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

DEFAULT_RULES_PATH = "rules.yaml"


def rules_path_from_env() -> Path:
    """Rules file location, overridable with PROXY_RULES_PATH."""
    return Path(os.environ.get("PROXY_RULES_PATH", DEFAULT_RULES_PATH))


def _strip_fence(content: str) -> str:
    # Accept a rules file wrapped in a ```yaml fenced block (e.g. in docs)
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_rules(path: Path | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if path is None:
        path = rules_path_from_env()
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
