"""Immutable options for the XML to JSONML converter.

A configuration is a frozen value. "Changing" an option always produces a new
instance through one of the ``with_*`` transformers; the receiver is never
touched, so instances (and the module-level presets) can be shared freely.

Derivation is layered: ``ParserConfiguration`` carries the options every XML
converter understands, and ``JSONMLParserConfiguration`` adds the JSONML-only
ones. Every transformer rebuilds ``type(self)``, so calling a base transformer
on a specialized instance keeps both its type and its extra fields.

Usage:
    from jsonml import DEFAULT_CONFIGURATION

    config = DEFAULT_CONFIGURATION.with_max_nesting_depth(64).with_preserve_order(True)
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

from .constants import DEFAULT_MAXIMUM_NESTING_DEPTH, UNDEFINED_MAXIMUM_NESTING_DEPTH

logger = logging.getLogger(__name__)

_ConfigT = TypeVar("_ConfigT", bound="ParserConfiguration")
_JSONMLConfigT = TypeVar("_JSONMLConfigT", bound="JSONMLParserConfiguration")


@dataclass(frozen=True, slots=True)
class ParserConfiguration:
    """Options shared by the XML converters.

    - `keep_strings`: keep leaf text as raw strings instead of coercing it to
      numbers, booleans or null.
    - `max_nesting_depth`: deepest element nesting the converter descends into.
      Stored as given; `UNDEFINED_MAXIMUM_NESTING_DEPTH` means unbounded.
    """

    keep_strings: bool = False
    max_nesting_depth: int = DEFAULT_MAXIMUM_NESTING_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.keep_strings, bool):
            object.__setattr__(self, "keep_strings", bool(self.keep_strings))
        if self.max_nesting_depth < UNDEFINED_MAXIMUM_NESTING_DEPTH:
            logger.debug(
                "max_nesting_depth=%d is below the unbounded sentinel (%d); storing as given",
                self.max_nesting_depth,
                UNDEFINED_MAXIMUM_NESTING_DEPTH,
            )

    @property
    def is_depth_bounded(self) -> bool:
        return self.max_nesting_depth != UNDEFINED_MAXIMUM_NESTING_DEPTH

    def options(self) -> dict[str, Any]:
        """Return a fresh mapping of option name to value.

        Values are deep copies, so a subclass that adds a mutable container
        never shares it with the caller. Fields declared with ``init=False``
        are reported too.
        """
        return {f.name: copy.deepcopy(getattr(self, f.name)) for f in fields(self)}

    def duplicate(self: _ConfigT) -> _ConfigT:
        """Return a new, equal instance of the same concrete type."""
        return self.derive()

    def derive(self: _ConfigT, **changes: Any) -> _ConfigT:
        """Return a copy of this configuration with `changes` applied.

        Init fields are deep-copied and passed to ``dataclasses.replace``;
        ``init=False`` fields are recomputed by the constructor. Unknown option
        names raise TypeError.
        """
        values = {f.name: copy.deepcopy(getattr(self, f.name)) for f in fields(self) if f.init}
        values.update(changes)
        return replace(self, **values)

    def with_keep_strings(self: _ConfigT, new_value: bool) -> _ConfigT:
        return self.derive(keep_strings=new_value)

    def with_max_nesting_depth(self: _ConfigT, new_value: int) -> _ConfigT:
        """Return a copy limited to `new_value` levels of nesting.

        No bounds check is made: zero and negative values are passed through
        and their meaning is up to the converter.
        """
        return self.derive(max_nesting_depth=new_value)


@dataclass(frozen=True, slots=True)
class JSONMLParserConfiguration(ParserConfiguration):
    """Options for the XML to JSONML converter.

    Adds `preserve_order`: when True the converter must keep element attributes
    in an insertion-ordered mapping; by default any mapping will do.

    Positional arguments follow field order, so
    ``JSONMLParserConfiguration(keep_strings, max_nesting_depth, preserve_order)``
    sets every option at once.
    """

    preserve_order: bool = False

    def __post_init__(self) -> None:
        # Zero-argument super() does not work in slotted dataclasses.
        ParserConfiguration.__post_init__(self)
        if not isinstance(self.preserve_order, bool):
            object.__setattr__(self, "preserve_order", bool(self.preserve_order))

    def with_preserve_order(self: _JSONMLConfigT, new_value: bool) -> _JSONMLConfigT:
        return self.derive(preserve_order=new_value)


DEFAULT_CONFIGURATION: JSONMLParserConfiguration = JSONMLParserConfiguration()

# Same as the default, but leaf text is never coerced.
KEEP_STRINGS_CONFIGURATION: JSONMLParserConfiguration = DEFAULT_CONFIGURATION.with_keep_strings(True)
