"""
Error hierarchy for iashell.

Only FatalSessionError is allowed to end the process; everything else is
reported to the user and the shell keeps looping.
"""


class IashellError(Exception):
    """Base for all iashell errors."""


class GatewayError(IashellError):
    """The model backend could not complete a request (connection, HTTP, timeout)."""


class FatalSessionError(IashellError):
    """A usable session cannot be established (no backend, no models, no input)."""
