"""
Navigator configuration.

Provides centralized configuration with support for:
- Environment variables (PANELNAV_* prefix)
- JSON config files
- Keyword overrides
- Validated defaults

Configuration priority (highest to lowest):
1. Keyword overrides
2. Config file
3. Environment variables
4. Hardcoded defaults
"""

from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "PANELNAV_"


class NavigatorConfig(BaseModel):
    """Behaviour of the navigator plus the demo window defaults."""

    # Navigation behaviour
    strict_back: bool = Field(
        default=True,
        description="Raise HistoryUnderflowError on back() with no previous screen; "
                    "when False, back() is a logged no-op"
    )
    max_history: Optional[int] = Field(
        default=None,
        ge=1,
        description="Keep at most this many history entries (None = unbounded)"
    )
    initial_route: str = Field(
        default="home",
        min_length=1,
        description="Route opened when the application window starts"
    )

    # Logging
    log_dir: Path = Field(
        default=Path("logs"),
        description="Directory for rotating log files"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level of the panelnav logger"
    )

    # Window defaults
    window_title: str = Field(default="panelnav", description="Main window title")
    window_width: int = Field(default=1000, ge=200, description="Initial window width")
    window_height: int = Field(default=650, ge=200, description="Initial window height")

    model_config = {
        "validate_assignment": True,
    }

    @field_validator("log_dir", mode="before")
    @classmethod
    def resolve_path(cls, v) -> Path:
        """Resolve relative paths against the current working directory."""
        if v is None:
            return v
        path = Path(v)
        if not path.is_absolute():
            path = Path.cwd() / path
        return path.resolve()

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "NavigatorConfig":
        """
        Load configuration from environment variables.

        Environment variable format: {prefix}{FIELD_NAME}
        Example: PANELNAV_STRICT_BACK=false, PANELNAV_MAX_HISTORY=50

        Args:
            prefix: Prefix for environment variables (default: "PANELNAV_")

        Returns:
            NavigatorConfig instance with values from environment
        """
        config_dict = {}

        for field_name, field_info in cls.model_fields.items():
            env_value = os.getenv(f"{prefix}{field_name.upper()}")
            if env_value is None:
                continue

            field_type = field_info.annotation
            if field_type is bool:
                config_dict[field_name] = env_value.lower() in ("true", "1", "yes", "on")
            elif field_type is int:
                config_dict[field_name] = int(env_value)
            elif field_type == Optional[int]:
                config_dict[field_name] = None if env_value.lower() in ("", "none") else int(env_value)
            elif field_type is Path:
                config_dict[field_name] = Path(env_value)
            else:
                config_dict[field_name] = env_value

        return cls(**config_dict)

    @classmethod
    def from_file(cls, config_file: Path) -> "NavigatorConfig":
        """
        Load configuration from a JSON config file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        config_file = Path(config_file)

        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = json.load(f)

        # Ignore metadata keys that aren't part of the model
        config_dict = {k: v for k, v in config_dict.items() if k in cls.model_fields}

        return cls(**config_dict)

    def save(self, config_file: Path) -> None:
        """Save configuration as pretty-printed JSON."""
        config_file = Path(config_file)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)
            f.write("\n")

    def merge_with(self, **overrides) -> "NavigatorConfig":
        """Return a new config with ``overrides`` applied."""
        config_dict = self.model_dump()
        config_dict.update(overrides)
        return NavigatorConfig(**config_dict)


def load_config(config_file: Optional[Path] = None, **overrides) -> NavigatorConfig:
    """
    Build a config honouring overrides > file > environment > defaults.

    Args:
        config_file: Optional JSON file layered over the environment
        **overrides: Field values that win over everything else; an explicit
            None is kept (e.g. ``max_history=None`` lifts a bound)

    Returns:
        Merged NavigatorConfig
    """
    config_dict = NavigatorConfig.from_env().model_dump(exclude_unset=True)

    if config_file is not None:
        file_config = NavigatorConfig.from_file(config_file)
        config_dict.update(file_config.model_dump(exclude_unset=True))

    config_dict.update(overrides)
    return NavigatorConfig(**config_dict)
