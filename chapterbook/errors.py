"""Exceptions raised by the book model."""


class BookError(Exception):
    """Base class for all chapterbook errors."""


class ConfigurationError(BookError, ValueError):
    """A section or chapter record is missing a required field."""


class NumberingError(BookError, ValueError):
    """An ordinal falls outside the roman numeral table."""


class OrderingError(BookError):
    """Chapters were added out of section order."""


class EmptyRepositoryError(BookError, LookupError):
    """A chapter was requested from a repository with no chapters."""
