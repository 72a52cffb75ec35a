"""
Logger configuration management

Holds the resolved, per-instance options of a Logger. Environment
variables are only consulted by ``LoggerConfig.from_env``.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

from context_logger.core.log_level import LogLevel

DEFAULT_LOG_LIMIT = 7000

# camelCase option names accepted for compatibility
OPTION_ALIASES = {
    "logLevel": "log_level",
    "logLimit": "log_limit",
    "logPatterns": "log_patterns",
}


@dataclass(frozen=True)
class LoggerConfig:
    """
    Logger configuration.

    Frozen once built; derive variants with ``derive``.
    """

    context: Any = None
    namespace: str = ""
    log_level: Union[LogLevel, str] = LogLevel.ERROR
    log_patterns: Optional[str] = None
    log_limit: Union[int, str] = DEFAULT_LOG_LIMIT

    # Output settings
    app_name: Optional[str] = None
    pretty_print: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        object.__setattr__(self, "log_level", LogLevel.coerce(self.log_level))

        limit = self.log_limit
        if isinstance(limit, str):
            if not limit.strip().isdigit():
                raise ValueError(f"log_limit must be an integer, got {limit!r}")
            limit = int(limit)
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"log_limit must be an integer, got {limit!r}")
        if limit <= 0:
            raise ValueError("log_limit must be positive")
        object.__setattr__(self, "log_limit", limit)

        if self.namespace is None:
            object.__setattr__(self, "namespace", "")
        if self.log_patterns is not None and not self.log_patterns.strip():
            object.__setattr__(self, "log_patterns", None)

    def derive(self, **changes) -> "LoggerConfig":
        """Return a copy with ``changes`` applied."""
        return replace(self, **normalize_options(changes))

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides
    ) -> "LoggerConfig":
        """
        Create configuration from environment variables.

        Recognized variables: LOG_LEVEL, LOG_LIMIT, LOG_NAMESPACES,
        APP_NAME and LOGS_PRETTY_PRINT. Explicit ``overrides`` win over
        the environment.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Option values taking precedence

        Returns:
            New LoggerConfig instance
        """
        env = os.environ if environ is None else environ
        options = {}

        if env.get("LOG_LEVEL"):
            options["log_level"] = env["LOG_LEVEL"]
        if env.get("LOG_LIMIT"):
            options["log_limit"] = env["LOG_LIMIT"]
        if env.get("LOG_NAMESPACES"):
            options["log_patterns"] = env["LOG_NAMESPACES"]
        if env.get("APP_NAME"):
            options["app_name"] = env["APP_NAME"]
        options["pretty_print"] = bool(env.get("LOGS_PRETTY_PRINT"))

        options.update(
            {k: v for k, v in normalize_options(overrides).items() if v is not None}
        )
        return cls(**options)

    @classmethod
    def debug_config(cls, **overrides) -> "LoggerConfig":
        """Create configuration for local debugging."""
        options = {"log_level": LogLevel.DEBUG, "pretty_print": True}
        options.update(normalize_options(overrides))
        return cls(**options)


def normalize_options(options: Mapping[str, Any]) -> dict:
    """
    Translate camelCase option names to their field names.

    Raises:
        ValueError: If an option is unknown or given under both spellings
    """
    normalized = {}
    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in LoggerConfig.__dataclass_fields__:
            raise ValueError(f"Unknown logger option: {key}")
        if name in normalized:
            raise ValueError(f"Logger option given twice: {name}")
        normalized[name] = value
    return normalized
