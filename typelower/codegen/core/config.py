"""
Configuration management for type lowering.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from .generator import GeneratorError


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class LoweringConfig:
    """Configuration for lowering types into Go source text."""

    # Named types are referenced through a pointer
    named_type_pointers: bool = True

    # Struct tag settings
    tag_key: str = "json"
    omit_marker: str = "omitempty"

    # Code style
    field_indent: str = "\t"

    # Bare name used for an anonymous object where only a name fits
    unknown_type: str = "map[string]interface{}"

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        self._defaults: Dict[str, Any] = asdict(LoweringConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> LoweringConfig:
        """
        Get complete lowering configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged and validated configuration

        Raises:
            ConfigError: If the file cannot be read or a value is invalid
        """
        base_config = dict(self._defaults)
        base_config["custom"] = dict(base_config["custom"])

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)
        self.validate_config(config)
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> LoweringConfig:
        """Convert dictionary to LoweringConfig, unknown keys go to custom."""
        known_fields = {f.name for f in fields(LoweringConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        custom = config_args.get("custom") or {}
        if not isinstance(custom, dict):
            raise ConfigError(f"custom must be a JSON object: {custom!r}")

        if custom_args:
            existing_custom = dict(custom)
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return LoweringConfig(**config_args)

    def save_config(self, config: LoweringConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def validate_config(self, config: LoweringConfig) -> None:
        """Raise ConfigError for values that would produce invalid Go."""
        for name in ("tag_key", "omit_marker", "field_indent", "unknown_type"):
            value = getattr(config, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string: {value!r}")

        if not isinstance(config.named_type_pointers, bool):
            raise ConfigError(
                f"named_type_pointers must be a boolean: {config.named_type_pointers!r}"
            )

        if not config.tag_key or not config.tag_key.isidentifier():
            raise ConfigError(f"Invalid tag_key: {config.tag_key!r}")

        if any(c in config.omit_marker for c in ',"` '):
            raise ConfigError(f"Invalid omit_marker: {config.omit_marker!r}")

        if config.field_indent.strip():
            raise ConfigError("field_indent must contain only whitespace")

        if not config.unknown_type:
            raise ConfigError("unknown_type cannot be empty")


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> LoweringConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
