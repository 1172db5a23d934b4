"""Errors raised inside the reconnaissance engine.

They never cross the scan boundary: the coordinator folds them into
``ScanReport.error``.
"""


class ReconError(Exception):
    """Base class for reconnaissance failures."""


class InvalidInput(ReconError):
    """The request cannot be acted on, e.g. an empty host."""


class HostUnresolvable(ReconError):
    """Forward resolution failed or returned no addresses."""

    def __init__(self, host: str):
        self.host = host
        super().__init__(f"Could not resolve host: {host}")
