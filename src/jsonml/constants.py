"""Nesting-depth constants shared by the parser configurations.

Usage:
    from jsonml.constants import DEFAULT_MAXIMUM_NESTING_DEPTH
"""

# Depth used by the default presets. The converter fails once an element is
# nested deeper than this.
DEFAULT_MAXIMUM_NESTING_DEPTH = 512

# Sentinel meaning "no limit".
UNDEFINED_MAXIMUM_NESTING_DEPTH = -1
