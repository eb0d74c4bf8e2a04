"""Fetch configuration using Pydantic.

The retry, cooldown and timeout options accepted by every public
operation, plus helpers to load them from a YAML or JSON file.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILENAMES = ("bedrock-versions.yaml", "bedrock-versions.yml", "bedrock-versions.json")


class FetchConfig(BaseModel):
    """Validated retry/timeout policy for the links endpoint request.

    Both snake_case and the camelCase spellings are accepted, so config
    files may use either ``cooldown_ms`` or ``cooldownMs``.

    Example YAML::

        retries: 2
        cooldownMs: 5000
        timeoutMs: 10000

    Attributes:
        retries: Number of retries after the initial attempt.
        cooldown_ms: Delay between a failed attempt and the next one.
        timeout_ms: Deadline for a single attempt.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retries: int = Field(default=1, ge=0)
    cooldown_ms: int = Field(default=15000, ge=0, alias="cooldownMs")
    timeout_ms: int = Field(default=30000, gt=0, alias="timeoutMs")

    @property
    def cooldown_seconds(self) -> float:
        return self.cooldown_ms / 1000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def merged(self, **overrides: Any) -> "FetchConfig":
        """Return a validated copy with every non-``None`` override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self
        return FetchConfig.model_validate({**self.model_dump(), **updates})


def load_config(path: Path) -> FetchConfig:
    """Load a fetch configuration from a YAML or JSON file.

    Args:
        path: Path to the config file.

    Returns:
        Validated ``FetchConfig`` instance.

    Raises:
        FileNotFoundError: if the file doesn't exist.
        pydantic.ValidationError: if content fails validation.
    """
    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if suffix in (".yaml", ".yml"):
        raw = yaml.safe_load(content) or {}
    elif suffix == ".json":
        raw = json.loads(content) if content.strip() else {}
    else:
        try:
            raw = yaml.safe_load(content) or {}
        except yaml.YAMLError:
            raw = json.loads(content)

    return FetchConfig.model_validate(raw)


def find_config() -> Path | None:
    """Find a config file in the working directory, preferring YAML.

    Returns:
        Path of the first existing config file, or ``None``.
    """
    for name in CONFIG_FILENAMES:
        candidate = Path(name)
        if candidate.exists():
            return candidate
    return None
