"""
Configuration for CST patch transforms.

Provides configuration schema, validation and loading.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

if TYPE_CHECKING:
    from .transform.traversal import TraversalAdapter

logger = logging.getLogger(__name__)


class TransformConfig(BaseModel):
    """Configuration for building transforms.

    Traversal modes:
    - auto: choose from the LibCST version (probed once, or `libcst_version`)
    - standard: LibCST child visiting with FlattenSentinel
    - root_splice: module-level splicing for LibCST < 0.3.18
    """

    model_config = {"extra": "forbid", "frozen": True}

    traversal: Literal["auto", "standard", "root_splice"] = Field(
        default="auto", description="Traversal adapter selection"
    )
    libcst_version: Optional[str] = Field(
        default=None,
        description="LibCST version used by 'auto' instead of the installed one",
    )

    @field_validator("libcst_version")
    @classmethod
    def validate_libcst_version(cls, v: Optional[str]) -> Optional[str]:
        """Reject blank version strings."""
        if v is not None and not v.strip():
            raise ValueError("libcst_version must not be empty")
        return v.strip() if v is not None else v

    def build_traversal(self) -> "TraversalAdapter":
        """
        Return traversal adapter for this configuration.

        Raises:
            UnsupportedTraversalError: If 'auto' cannot resolve the version
        """
        from .transform.traversal import (
            RootSpliceTraversal,
            StandardTraversal,
            default_traversal,
            select_traversal,
        )

        if self.traversal == "standard":
            return StandardTraversal()
        if self.traversal == "root_splice":
            return RootSpliceTraversal()
        if self.libcst_version is not None:
            return select_traversal(self.libcst_version)
        return default_traversal()


def validate_config(
    config_path: Path,
) -> tuple[bool, Optional[str], Optional[TransformConfig]]:
    """
    Validate configuration file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Tuple of (is_valid, error_message, config_object)
    """
    if not config_path.exists():
        return False, f"Configuration file not found: {config_path}", None

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None

    if not isinstance(config_data, dict):
        return False, "Configuration must be a JSON object", None

    try:
        config = TransformConfig(**config_data)
    except ValidationError as e:
        return False, f"Validation error: {str(e)}", None

    return True, None, config


def load_config(config_path: Path) -> TransformConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        TransformConfig object

    Raises:
        ConfigError: If configuration is invalid
    """
    is_valid, error, config = validate_config(Path(config_path))
    if not is_valid or config is None:
        raise ConfigError(
            error or "Invalid configuration", details={"path": str(config_path)}
        )
    logger.debug("Loaded transform config from %s: %s", config_path, config)
    return config
