from __future__ import annotations


class DailyStoicError(RuntimeError):
    """Base class for every failure the reader reports to the user."""


class ConfigError(DailyStoicError):
    pass


class InvalidDate(DailyStoicError, ValueError):
    """Unparseable or out-of-range "Month Day" label."""


class TransportError(DailyStoicError):
    """The document could not be fetched or read."""


class RecordNotFound(DailyStoicError):
    """Start or end boundary line for a date is missing from the document."""


class MalformedRecord(DailyStoicError):
    """A located block has no title line or no attribution line."""


class CorrectionFailed(DailyStoicError):
    """The correction service returned an error or an unusable response."""
