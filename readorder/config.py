"""Ordering configuration module.

This module provides:
- OrderingConfig: Dataclass for all reading-order configuration options
- YAML configuration file loading
- Validation of sorter / direction / renderer / thresholds
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from readorder.constants import (
    DEFAULT_MIN_GAP_RATIO,
    DEFAULT_MIN_VALUE_RATIO,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SORTER,
)
from readorder.exceptions import InvalidConfigError, MissingConfigError
from readorder.layout.ordering import Direction, sorter_registry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("settings") / "config.yaml"

VALID_RENDERERS = ("markdown", "text", "json")


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML configuration file with error handling.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dict, or empty dict if file not found or invalid
    """
    try:
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning("Ignoring config file %s: top level is not a mapping", config_path)
                return {}
            return data
        logger.debug("Config file not found: %s", config_path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


@dataclass
class OrderingConfig:
    """Reading-order configuration with validation.

    Configuration Sources (in order of precedence):
    1. Constructor arguments (highest priority)
    2. CLI arguments via from_cli()
    3. YAML configuration files via from_yaml()
    4. Default values (lowest priority)

    Example:
        >>> config = OrderingConfig(direction="vertical")
        >>> config.validate()

        >>> config = OrderingConfig.from_yaml(Path("settings/config.yaml"), sorter="position")
    """

    # ==================== Ordering ====================
    sorter: str = DEFAULT_SORTER
    direction: str = Direction.AUTO.value
    min_gap_ratio: float = DEFAULT_MIN_GAP_RATIO
    min_value_ratio: float = DEFAULT_MIN_VALUE_RATIO

    # ==================== Output Options ====================
    renderer: str = "markdown"
    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    save_document: bool = False

    def __post_init__(self) -> None:
        """Convert path strings to Path objects."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
        if isinstance(self.direction, Direction):
            self.direction = self.direction.value

    @classmethod
    def from_yaml(cls, config_path: Path, **overrides: Any) -> OrderingConfig:
        """Load configuration from YAML file.

        Keys may sit at the top level or under an ``ordering:`` section.
        Missing or unreadable files fall back to defaults.

        Args:
            config_path: Path to YAML configuration file
            **overrides: Values to override from file

        Example:
            >>> config = OrderingConfig.from_yaml(Path("settings/config.yaml"), direction="horizontal")
        """
        yaml_config = _load_yaml_config(config_path)

        section = yaml_config.get("ordering")
        if isinstance(section, dict):
            yaml_config = {**yaml_config, **section}

        field_names = (
            "sorter",
            "direction",
            "min_gap_ratio",
            "min_value_ratio",
            "renderer",
            "output_dir",
            "save_document",
        )

        kwargs: dict[str, Any] = {name: yaml_config[name] for name in field_names if name in yaml_config}
        kwargs.update(overrides)

        return cls(**kwargs)

    @staticmethod
    def _get_arg(args: argparse.Namespace, name: str, default: Any = None) -> Any:
        return getattr(args, name, default)

    @classmethod
    def _extract_cli_kwargs(cls, args: argparse.Namespace) -> dict[str, Any]:
        """Extract configuration kwargs from CLI arguments.

        Args:
            args: Parsed CLI arguments

        Returns:
            Dictionary of config kwargs (only options given on the command line)
        """
        # Format: (cli_name, config_name, transform_func)
        mappings: list[tuple[str, str, Any]] = [
            ("sorter", "sorter", None),
            ("direction", "direction", None),
            ("min_gap_ratio", "min_gap_ratio", None),
            ("min_value_ratio", "min_value_ratio", None),
            ("renderer", "renderer", None),
            ("output", "output_dir", Path),
        ]

        kwargs: dict[str, Any] = {}

        for cli_name, config_name, transform in mappings:
            value = cls._get_arg(args, cli_name)
            if value is not None:
                kwargs[config_name] = transform(value) if transform else value

        if cls._get_arg(args, "json_only"):
            kwargs["renderer"] = "json"
        if cls._get_arg(args, "save_document"):
            kwargs["save_document"] = True

        return kwargs

    @classmethod
    def from_cli(cls, args: argparse.Namespace) -> OrderingConfig:
        """Create configuration from CLI arguments layered over the YAML file.

        ``--config`` names the YAML file; without it settings/config.yaml is
        used when present.

        Raises:
            MissingConfigError: If an explicitly given config file does not exist
        """
        kwargs = cls._extract_cli_kwargs(args)

        config_arg = cls._get_arg(args, "config")
        if config_arg is not None:
            config_path = Path(config_arg)
            if not config_path.exists():
                raise MissingConfigError(f"Config file not found: {config_path}")
        else:
            config_path = DEFAULT_CONFIG_PATH

        return cls.from_yaml(config_path, **kwargs)

    def validate(self) -> None:
        """Validate and normalize configuration.

        Raises:
            InvalidConfigError: If configuration is invalid

        Example:
            >>> OrderingConfig(direction="diagonal").validate()  # Raises InvalidConfigError
        """
        if not sorter_registry.is_available(self.sorter):
            available = ", ".join(sorter_registry.list_available())
            raise InvalidConfigError(f"Unknown sorter: {self.sorter}. Available: {available}")

        direction = str(self.direction).lower()
        valid_directions = [d.value for d in Direction]
        if direction not in valid_directions:
            raise InvalidConfigError(f"Invalid direction: {self.direction}. Must be one of: {valid_directions}")
        self.direction = direction

        renderer = str(self.renderer).lower()
        if renderer not in VALID_RENDERERS:
            raise InvalidConfigError(f"Invalid renderer: {self.renderer}. Must be one of: {list(VALID_RENDERERS)}")
        self.renderer = renderer
        self.save_document = bool(self.save_document)

        try:
            self.min_gap_ratio = float(self.min_gap_ratio)
            self.min_value_ratio = float(self.min_value_ratio)
        except (TypeError, ValueError) as e:
            raise InvalidConfigError(f"Thresholds must be numbers: {e}") from e

        if not 0.0 <= self.min_gap_ratio < 1.0:
            raise InvalidConfigError(f"min_gap_ratio must be in [0, 1), got {self.min_gap_ratio}")
        if self.min_value_ratio < 0.0:
            raise InvalidConfigError(f"min_value_ratio must be >= 0, got {self.min_value_ratio}")

        logger.info(
            "Configuration validated: sorter=%s, direction=%s, min_gap_ratio=%.3f, min_value_ratio=%.3f, renderer=%s",
            self.sorter,
            self.direction,
            self.min_gap_ratio,
            self.min_value_ratio,
            self.renderer,
        )

    def sorter_kwargs(self) -> dict[str, Any]:
        """Constructor arguments for the configured sorter."""
        if self.sorter == DEFAULT_SORTER:
            return {
                "direction": self.direction,
                "min_gap_ratio": self.min_gap_ratio,
                "min_value_ratio": self.min_value_ratio,
            }
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "sorter": self.sorter,
            "direction": self.direction,
            "min_gap_ratio": self.min_gap_ratio,
            "min_value_ratio": self.min_value_ratio,
            "renderer": self.renderer,
            "output_dir": str(self.output_dir),
            "save_document": self.save_document,
        }
