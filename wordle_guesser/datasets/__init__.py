from .validator import validate_dictionary, pretty_summary
from .io import (Dictionary, Word, load_dictionary, read_dictionary, bundled_dictionary,
                 write_dictionary, word_to_letters)

__all__ = ["validate_dictionary", "pretty_summary", "Dictionary", "Word", "load_dictionary",
           "read_dictionary", "bundled_dictionary", "write_dictionary", "word_to_letters"]
