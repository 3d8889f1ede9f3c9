from .engine import generate_guesses, Constraints, matches
from .errors import GuessError, DecodeError, MalformedInput, ConfigError

__all__ = ["generate_guesses", "Constraints", "matches",
           "GuessError", "DecodeError", "MalformedInput", "ConfigError"]
