"""
Registry of named string formats.

Formats are predicates attached to string schemas through the `format`
keyword. The registry starts empty; callers register the formats their
schemas use before transforming them:

    register_format("email", lambda s: "@" in s)
    Email = transform({"type": "string", "format": "email"})

The module-level `default_registry` is shared by the whole process. It
provides no locking: concurrent callers must serialize `register` and
`reset` themselves.
"""

import logging
from typing import Any, Callable, Dict, List

from .api import DuplicateFormatError, UnknownFormatError

logger = logging.getLogger("json_schema_types")

FormatFunc = Callable[[Any], bool]


class FormatRegistry:
    """Mapping from format name to the predicate that checks it."""

    def __init__(self):
        """Initialize an empty registry."""
        self._formats: Dict[str, FormatFunc] = {}

    def register(self, name: str, predicate: FormatFunc) -> None:
        """
        Register a format.

        Args:
            name: Format name, as used by the `format` keyword
            predicate: Function returning True for strings in the format

        Raises:
            DuplicateFormatError: If `name` is already registered
            TypeError: If `predicate` is not callable
        """
        if name in self._formats:
            raise DuplicateFormatError(name)
        if not callable(predicate):
            raise TypeError(f"format predicate for '{name}' must be callable")
        self._formats[name] = predicate
        logger.debug(f"Registered format '{name}'")

    def reset(self) -> None:
        """Remove every registered format."""
        self._formats = {}
        logger.debug("Reset all formats")

    def get(self, name: str) -> FormatFunc:
        """
        Look up a format.

        Raises:
            UnknownFormatError: If `name` is not registered
        """
        try:
            return self._formats[name]
        except KeyError:
            raise UnknownFormatError(name) from None

    def names(self) -> List[str]:
        return list(self._formats)

    def __contains__(self, name: Any) -> bool:
        return name in self._formats


default_registry = FormatRegistry()


def register_format(name: str, predicate: FormatFunc) -> None:
    """Register a format in the process-wide registry."""
    default_registry.register(name, predicate)


def reset_formats() -> None:
    """Clear the process-wide registry."""
    default_registry.reset()
