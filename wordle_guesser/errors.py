"""
Typed failures raised by the guess helper.

Library code raises these; the service handler and the CLI translate them
into status codes / exit codes. Both concrete errors are also ValueErrors so
callers that only care about "bad data" can catch that.
"""


class GuessError(Exception):
    """Base class for every failure surfaced by wordle_guesser."""


class DecodeError(GuessError, ValueError):
    """The dictionary resource is not valid UTF-8 text."""


class MalformedInput(GuessError, ValueError):
    """Caller-supplied constraints have the wrong shape (length, token size, types)."""


class ConfigError(GuessError, ValueError):
    """A setting (usually a WORDLE_* environment variable) has an unusable value."""
