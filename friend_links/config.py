"""Configuration loading for friend link generation.

The configuration is a TOML file with four parts::

    [github]
    token = "..."          # optional, falls back to GITHUB_TOKEN
    owner = "octocat"
    repository = "friend-links"

    [generation]
    label = "approved"
    sort_by_updated_time = false

    [output]
    json_path = "friend_links.json"
    js_path = "friend_links.js"   # optional

    [[groups]]
    name = "Friends"
    description = "People I know"
    label = "group-friends"

The order of ``[[groups]]`` tables is the order of groups in the output.
"""

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = "config.toml"


class GitHubConfig(BaseModel):
    """Access settings for the repository holding the submissions."""

    token: str | None = Field(
        None, description="GitHub API token (defaults to GITHUB_TOKEN env var)"
    )
    owner: str = Field(..., description="Owner of the repository")
    repository: str = Field(..., description="Name of the repository")

    def resolve_token(self) -> str | None:
        """Return the configured token, or the GITHUB_TOKEN env var."""
        return self.token or os.getenv("GITHUB_TOKEN")


class GenerationConfig(BaseModel):
    """Settings that drive entry selection and ordering."""

    label: str = Field(
        ..., description="Label marking an issue as eligible for any group"
    )
    sort_by_updated_time: bool = Field(
        False, description="Order entries by updated time instead of creation time"
    )


class GroupConfig(BaseModel):
    """A single output category."""

    name: str = Field(..., description="Display name of the group")
    description: str = Field(..., description="Display description of the group")
    label: str = Field(..., description="Label identifying group membership")


class OutputConfig(BaseModel):
    """Where the generated artifacts are written."""

    json_path: Path = Field(
        Path("friend_links.json"), description="Path of the JSON artifact"
    )
    js_path: Path | None = Field(
        None, description="Path of the JavaScript artifact (skipped when unset)"
    )


class Config(BaseModel):
    """Complete generator configuration."""

    github: GitHubConfig
    generation: GenerationConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    groups: list[GroupConfig] = Field(default_factory=list)

    @field_validator("groups")
    @classmethod
    def validate_unique_labels(cls, groups: list[GroupConfig]) -> list[GroupConfig]:
        """Ensure every group label is used only once."""
        seen: set[str] = set()
        for group in groups:
            if group.label in seen:
                raise ValueError(f"Duplicate group label: {group.label}")
            seen.add(group.label)
        return groups


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """Read and validate a TOML configuration file.

    Args:
        path: Path to the TOML file

    Returns:
        Validated Config object

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    config_path = Path(path)
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {config_path}: {e}")
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse configuration file {config_path}: {e}")

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}")
