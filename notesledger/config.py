"""
notesledger configuration.

Example notesledger.yaml:

    bot_name: notesbot
    marker_name: SUMMARY
    max_retries: 3
    generator: notesledger
    help_url: https://github.com/notesledger/notesledger/wiki/Note
    log_level: INFO
    log_file: null
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from notesledger.core.dispatcher import DEFAULT_MARKER_NAME, DEFAULT_MAX_RETRIES, CommandDispatcher
from notesledger.core.exceptions import ConfigError, ValidationError
from notesledger.core.render import DEFAULT_GENERATOR, DEFAULT_HELP_URL, RenderOptions
from notesledger.editor.region import validate_marker_name
from notesledger.utils.logging_utils import LOG_LEVELS


@dataclass
class NotesConfig:
    """Settings shared by the CLI and embedding services."""

    bot_name:    str = "notesbot"
    marker_name: str = DEFAULT_MARKER_NAME
    max_retries: int = DEFAULT_MAX_RETRIES
    generator:   str = DEFAULT_GENERATOR
    help_url:    str = DEFAULT_HELP_URL
    log_level:   str = "INFO"
    log_file:    Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("bot_name", "generator", "help_url", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{name}' must be a non-empty string", {name: value})
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"'log_level' must be one of {', '.join(LOG_LEVELS)}",
                {"log_level": self.log_level},
            )
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigError("'log_file' must be a string or null", {"log_file": self.log_file})
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise ConfigError("'max_retries' must be an integer", {"max_retries": self.max_retries})
        if self.max_retries < 0:
            raise ConfigError("'max_retries' must be >= 0", {"max_retries": self.max_retries})
        try:
            validate_marker_name(self.marker_name)
        except ValidationError as e:
            raise ConfigError(e.message, e.details) from e

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "NotesConfig":
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping", {"got": type(data).__name__})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("Unknown config keys", {"keys": ",".join(unknown)})
        return cls(**data)

    @classmethod
    def from_yaml(cls, config_file: Path) -> "NotesConfig":
        """Load config from a YAML file."""
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigError("Config file not found", {"path": str(config_file)}) from None
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", {"path": str(config_file)}) from e
        return cls.from_dict(data)

    def render_options(self) -> RenderOptions:
        return RenderOptions(generator=self.generator, help_url=self.help_url)

    def build_dispatcher(self, editor) -> CommandDispatcher:
        return CommandDispatcher(
            editor,
            marker_name= self.marker_name,
            max_retries= self.max_retries,
            options=     self.render_options(),
        )
