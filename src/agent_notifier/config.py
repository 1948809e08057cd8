"""Notifier configuration loaded from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from agent_notifier.exceptions import ConfigError


class NotifierConfig(BaseModel):
    """Which external program receives notifications."""

    notify: list[str] | None = Field(
        default=None,
        description="Executable followed by fixed leading arguments",
    )


def load_notifier_config(path: str | Path) -> NotifierConfig:
    """Load notifier configuration from a YAML file.

    Example file::

        notify: ["notify-send-wrapper", "--urgency", "low"]

    Args:
        path: Path to the YAML file.

    Returns:
        Validated NotifierConfig. An empty file yields the defaults.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)

    if not config_path.is_file():
        raise ConfigError(f"Notifier config not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as file_handle:
            data = yaml.safe_load(file_handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read notifier config: {exc}") from exc

    if data is None:
        return NotifierConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Notifier config must be a mapping, got {type(data).__name__}"
        )

    try:
        return NotifierConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid notifier config: {exc}") from exc
