"""Configuration validation with declarative schema definitions.

`ConfigField` / `ConfigItems` describe the expected keys of a configuration
section; `ConfigValidator` checks a section against them and reports every
problem as a formatted error string (typos get a "did you mean" hint).
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .config import BOOL_STRINGS

__all__ = [
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
]


@dataclass
class ConfigField:
    """Describes an expected configuration field.

    Attributes:
        name: The configuration key name
        field_type: Expected type (str, int, float, bool, list, dict) or tuple of types for union
        required: Whether the field is required
        default: Default value if not provided
        description: Human-readable description
        choices: List of valid values for enum-like fields
        item_type: For lists, the expected type of every item
        validator: Custom validator function returning list of error messages
    """

    name: str
    field_type: type | tuple[type, ...] = str
    required: bool = False
    default: Any = None
    description: str = ""
    choices: list | None = None
    item_type: type | None = None
    validator: Callable[[Any], list[str]] | None = None

    @property
    def type_name(self) -> str:
        """Return human-readable type name (e.g., 'str', 'list[str]')."""
        if isinstance(self.field_type, tuple):
            return " or ".join(typ.__name__ for typ in self.field_type)
        if self.item_type is not None:
            return f"{self.field_type.__name__}[{self.item_type.__name__}]"
        return self.field_type.__name__


class ConfigItems(list):
    """A list of ConfigField items with cached lookup by name."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)
        self._cache: dict[str, ConfigField] = {}

    def get(self, name: str) -> ConfigField | None:
        """Get a ConfigField by name."""
        v = self._cache.get(name)
        if not v:
            for prop in self:
                if prop.name == name:
                    v = prop
                    self._cache[name] = v
                    break
        return v


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Find a similar key using fuzzy matching."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    if matches:
        return matches[0]
    return None


def format_config_error(section: str, field: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message.

    Args:
        section: Configuration section name
        field: Field name that has the error
        message: Error description
        suggestion: Optional suggestion for fixing the error
    """
    msg = f"[{section}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Validates one configuration section against a schema."""

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: The configuration section to validate
            section: Name of the section, used in error messages
            logger: Logger instance for warnings
        """
        self.config = config
        self.section = section
        self.log = logger

    def validate(self, schema: ConfigItems) -> list[str]:
        """Validate the section against `schema`.

        Returns:
            List of error messages (empty if validation passed)
        """
        errors = []

        for field_def in schema:
            value = self.config.get(field_def.name)

            if value is None:
                if field_def.required:
                    errors.append(format_config_error(self.section, field_def.name, "Missing required field"))
                continue

            type_error = self._check_type(field_def, value)
            if type_error:
                errors.append(type_error)
                continue

            if field_def.choices is not None and value not in field_def.choices:
                choices_str = ", ".join(repr(c) for c in field_def.choices)
                errors.append(
                    format_config_error(
                        self.section,
                        field_def.name,
                        f"Invalid value {value!r}",
                        f"Valid options: {choices_str}",
                    )
                )

            if field_def.validator:
                errors.extend(format_config_error(self.section, field_def.name, error) for error in field_def.validator(value))

        return errors

    def _check_type(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        """Return an error message if `value` doesn't match the field type."""
        expected = field_def.field_type
        if isinstance(expected, tuple):
            if any(self._matches(typ, value) for typ in expected):
                return None
        elif self._matches(expected, value):
            if expected is list and field_def.item_type is not None:
                return self._check_items(field_def, value)
            return None
        return format_config_error(
            self.section,
            field_def.name,
            f"Expected {field_def.type_name}, got {type(value).__name__}",
        )

    @staticmethod
    def _matches(expected: type, value: Any) -> bool:  # noqa: ANN401
        if expected is bool:
            return isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_STRINGS)
        if expected in (int, float):
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, expected)

    def _check_items(self, field_def: ConfigField, value: list) -> str | None:
        item_type = field_def.item_type
        assert item_type is not None
        for index, item in enumerate(value):
            if not self._matches(item_type, item):
                return format_config_error(
                    self.section,
                    field_def.name,
                    f"Item #{index} should be {item_type.__name__}, got {type(item).__name__}",
                )
        return None

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log warnings for unknown configuration keys.

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = [f.name for f in schema]

        for key in self.config:
            if key in known_keys:
                continue

            similar = _find_similar_key(key, known_keys)
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"

            self.log.warning(msg)
            warnings.append(msg)

        return warnings
