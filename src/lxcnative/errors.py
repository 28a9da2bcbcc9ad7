"""Error types raised while importing an LXC native configuration.

Every failure aborts the whole import: there is no recovery and no
partial definition.  The hierarchy groups errors by what the user has to
fix in the configuration text:

``MalformedInputError``
    The text (or one value inside it) cannot be parsed.
``MissingPropertyError``
    A required key or option is absent.
``UnsupportedFeatureError``
    The configuration uses something this importer refuses to handle.

All errors carry the offending key and/or raw value when known, so the
CLI can point the user at the specific configuration line.
"""
from __future__ import annotations


class LxcImportError(Exception):
    """Base class for every import failure.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    key:
        The configuration key involved, if any.
    value:
        The raw configuration value involved, if any.
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.value = value


class MalformedInputError(LxcImportError):
    """The configuration text or one of its values cannot be parsed."""


class MissingPropertyError(LxcImportError):
    """A mandatory key or option is absent from the configuration."""


class UnsupportedFeatureError(LxcImportError):
    """The configuration requests a feature the importer does not support."""


class ConfSyntaxError(MalformedInputError):
    """Raised by the property store on a syntactically invalid line.

    Parameters
    ----------
    message:
        Description of what was expected.
    line:
        1-based line number where the error occurred.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.conf_message = message
        self.line = line


class FstabParseError(MalformedInputError):
    """A mount entry does not have the four mandatory fields."""


class SizeConversionError(MalformedInputError):
    """A size value is not numeric, has an unknown unit, or overflows."""


class RelativeSizeError(UnsupportedFeatureError):
    """A size was given as a percentage, which cannot be converted to bytes."""
