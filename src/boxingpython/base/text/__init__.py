from .extract import extract_labeled_line, extract_list, extract_number, extract_percentage
from .keywords import DEFAULT_KEYWORD_TABLE, KeywordTable
from .structured import (
    StructuredFields,
    coerce_int,
    find_structured_candidate,
    parse_structured,
    strip_structured_candidate,
)

__all__ = [
    "DEFAULT_KEYWORD_TABLE",
    "KeywordTable",
    "extract_number",
    "extract_percentage",
    "extract_list",
    "extract_labeled_line",
    "StructuredFields",
    "coerce_int",
    "find_structured_candidate",
    "parse_structured",
    "strip_structured_candidate",
]
