"""
Exceptions raised by the listing categorisation engine.
"""


class ListingEngineError(Exception):
    """Base class for listing engine errors."""
    pass


class PipelineTerminationError(ListingEngineError):
    """Raised in strict mode when the pipeline finishes without a result."""
    pass


class InvalidOverrideError(ListingEngineError):
    """Raised when a manual category override does not fit the taxonomy."""

    def __init__(self, override_id, reason: str):
        self.override_id = override_id
        self.reason = reason
        super().__init__(f"Invalid override {override_id!r}: {reason}")
