"""num2en converter registry.

Import this module to auto-register all converters.
"""

from num2en.tools.base import (
    BaseConverter,
    ConverterCategory,
    ConverterResult,
    ConverterSchema,
    get_all_converters,
    get_converter,
)

# Import converter modules to trigger @register_converter decorators
from num2en.tools import converters  # noqa: F401

__all__ = [
    "BaseConverter",
    "ConverterCategory",
    "ConverterResult",
    "ConverterSchema",
    "get_all_converters",
    "get_converter",
]
