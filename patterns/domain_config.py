"""Dataclass-based domain configuration pattern.

The bookstore defines its thresholds and runtime settings as a frozen
dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides (from env vars)
"""

import os
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InventoryConfig:
    """Inventory maintenance thresholds."""

    outdated_threshold_years: int = 5


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging settings."""

    level: str = "INFO"
    json_format: bool | None = None  # None: JSON when stdout is not a tty
    service: str = "bookstore"


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BookstoreConfig:
    """Complete configuration for the bookstore.

    Usage::

        config = BookstoreConfig.from_env()
        removed = store.remove_outdated_books(config.inventory.outdated_threshold_years)
    """

    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "BookstoreConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "BOOKSTORE_") -> "BookstoreConfig":
        """Create config from environment variables.

        Recognised variables (with the default prefix):
        BOOKSTORE_OUTDATED_THRESHOLD_YEARS, BOOKSTORE_LOG_LEVEL, BOOKSTORE_LOG_JSON.
        """
        inventory_overrides = {}
        threshold = os.getenv(f"{prefix}OUTDATED_THRESHOLD_YEARS")
        if threshold:
            inventory_overrides["outdated_threshold_years"] = int(threshold)

        logging_overrides = {}
        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            logging_overrides["level"] = level.upper()
        json_format = os.getenv(f"{prefix}LOG_JSON")
        if json_format:
            logging_overrides["json_format"] = json_format.lower() == "true"

        return cls(
            inventory=InventoryConfig(**inventory_overrides),
            logging=LoggingConfig(**logging_overrides),
        )
