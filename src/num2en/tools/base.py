"""Base converter class and registry for num2en.

Every converter extends BaseConverter and registers itself via the
@register_converter decorator, so it can be looked up by name and called
with keyword arguments (from the CLI or a function-calling loop).
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Global converter registry
# ---------------------------------------------------------------------------
_CONVERTER_REGISTRY: dict[str, type[BaseConverter]] = {}


def register_converter(cls: type[BaseConverter]) -> type[BaseConverter]:
    """Class decorator adding a converter under its ``name``.

    Names must be unique; registering a second class under a taken name
    raises ValueError.
    """
    existing = _CONVERTER_REGISTRY.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Converter name {cls.name!r} is already used by {existing.__qualname__}"
        )
    _CONVERTER_REGISTRY[cls.name] = cls
    return cls


def get_converter(name: str) -> type[BaseConverter]:
    try:
        return _CONVERTER_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_CONVERTER_REGISTRY))
        raise KeyError(f"No converter named {name!r} (known: {known})") from None


def get_all_converters() -> dict[str, type[BaseConverter]]:
    """Snapshot of the registry, name -> converter class."""
    return dict(_CONVERTER_REGISTRY)


# ---------------------------------------------------------------------------
# Enums & schemas
# ---------------------------------------------------------------------------


class ConverterCategory(str, Enum):
    """Kinds of conversion."""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    DIGITS = "digits"
    DECIMAL = "decimal"


class ConverterParameter(BaseModel):
    """Schema for a single converter parameter."""

    name: str
    type: str  # "string", "number", "integer"
    description: str
    required: bool = True
    enum: list[str] | None = None
    default: Any = None


class ConverterSchema(BaseModel):
    """Full schema for a converter, compatible with OpenAI function calling format."""

    name: str
    description: str
    category: ConverterCategory
    parameters: list[ConverterParameter]
    returns: str = Field(description="Description of what the converter returns")

    def to_openai_format(self) -> dict[str, Any]:
        """Convert to OpenAI function calling format."""
        properties = {}
        required = []

        for param in self.parameters:
            prop: dict[str, Any] = {
                "type": param.type,
                "description": param.description,
            }
            if param.enum:
                prop["enum"] = param.enum
            if param.default is not None:
                prop["default"] = param.default
            properties[param.name] = prop
            if param.required:
                required.append(param.name)

        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": properties,
                    "required": required,
                },
            },
        }


class ConverterResult(BaseModel):
    """Result returned by a converter execution."""

    converter_name: str
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None
    error_type: str | None = None

    @property
    def words(self) -> str | None:
        return self.data["words"] if self.data else None

    def to_message(self) -> str:
        """Format as a string suitable for display or feeding back to an LLM."""
        if self.success:
            return json.dumps(self.data, indent=2, default=str)
        return f"Error ({self.error_type}): {self.error}"


# ---------------------------------------------------------------------------
# Base converter class
# ---------------------------------------------------------------------------


class BaseConverter(ABC):
    """Abstract base for all num2en converters.

    Subclasses must define:
    - `name`: Unique string identifier.
    - `schema`: A ConverterSchema describing the converter.
    - `convert()`: Returns the words for the given arguments.
    """

    name: str = ""
    schema: ConverterSchema

    def __call__(self, **kwargs: Any) -> ConverterResult:
        """Run the converter with the given arguments."""
        return self.execute(**kwargs)

    def execute(self, **kwargs: Any) -> ConverterResult:
        """Run the conversion, capturing failures in the result."""
        try:
            words = self.convert(**kwargs)
        except (ValueError, TypeError, KeyError) as e:
            logger.debug("%s failed for %r: %s", self.name, kwargs, e)
            return ConverterResult(
                converter_name=self.name,
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )
        return ConverterResult(
            converter_name=self.name,
            success=True,
            data={"input": self._primary_input(kwargs), "words": words},
        )

    @abstractmethod
    def convert(self, **kwargs: Any) -> str:
        """Return the words for the given arguments."""

    def _primary_input(self, kwargs: dict[str, Any]) -> Any:
        first = self.schema.parameters[0].name
        return kwargs.get(first)

    def get_openai_schema(self) -> dict[str, Any]:
        """Get the OpenAI function calling schema for this converter."""
        return self.schema.to_openai_format()
