from .validator import validate_reference_data, pretty_summary
from .io import read_lines, load_words, load_frequency_table
from .library import Library

__all__ = ["validate_reference_data", "pretty_summary", "read_lines", "load_words",
           "load_frequency_table", "Library"]
