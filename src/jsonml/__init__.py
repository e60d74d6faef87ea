from .config import (
    DEFAULT_CONFIGURATION,
    KEEP_STRINGS_CONFIGURATION,
    JSONMLParserConfiguration,
    ParserConfiguration,
)
from .constants import DEFAULT_MAXIMUM_NESTING_DEPTH, UNDEFINED_MAXIMUM_NESTING_DEPTH

__all__ = [
    "DEFAULT_CONFIGURATION",
    "DEFAULT_MAXIMUM_NESTING_DEPTH",
    "KEEP_STRINGS_CONFIGURATION",
    "UNDEFINED_MAXIMUM_NESTING_DEPTH",
    "JSONMLParserConfiguration",
    "ParserConfiguration",
]
