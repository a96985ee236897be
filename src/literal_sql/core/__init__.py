"""Query engine: interpolation, parsing, classification and rendering."""

from .classifier import FRAGMENT_RULES, ClauseRule, classify_fragment
from .clauses import EMPTY_CLAUSES, Clauses, Section
from .interpolation import Raw, SQLTemplate, interpolate, to_template
from .parameters import positional_parameters, to_named
from .parser import parse_statement
from .renderer import render

__all__ = [
    "FRAGMENT_RULES",
    "ClauseRule",
    "classify_fragment",
    "EMPTY_CLAUSES",
    "Clauses",
    "Section",
    "Raw",
    "SQLTemplate",
    "interpolate",
    "to_template",
    "positional_parameters",
    "to_named",
    "parse_statement",
    "render",
]
