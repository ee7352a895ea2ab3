class ElpSeriesError(Exception):
    """Base error."""

class SeriesShapeError(ElpSeriesError, ValueError):
    """Raised when a table or argument vector does not match its series layout."""

class BackendUnavailableError(ElpSeriesError, RuntimeError):
    """Raised when an optional numeric backend (e.g. numpy) is not installed."""
