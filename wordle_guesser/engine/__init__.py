from .constraints import Constraints, matches, filter_candidates
from .validation import validate_constraints, validate_feedback
from .generator import generate_guesses, filter_dictionary
from .feedback import constraints_from_history, score

__all__ = ["score", "Constraints", "matches", "filter_candidates", "validate_constraints",
           "validate_feedback", "generate_guesses", "filter_dictionary",
           "constraints_from_history"]
