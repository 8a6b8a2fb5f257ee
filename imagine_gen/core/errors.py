from __future__ import annotations


class ImagineError(Exception):
    """Base class for every failure raised by imagine_gen."""


class InvalidArgument(ImagineError, TypeError):
    """A bound or seed was not a finite number (or not a supported type)."""


class EmptyDomain(ImagineError, IndexError):
    """A selection was asked to choose from nothing."""


class DanglingEscape(ImagineError, ValueError):
    """A template ended with a lone escape character."""


class ConfigError(ImagineError, ValueError):
    """A dataset config could not be interpreted."""
