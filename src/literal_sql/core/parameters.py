"""
SQL parameter export.

Queries number their parameters positionally (``$1, $2, ...``), which is
what psycopg/asyncpg style drivers expect. Drivers and SQLAlchemy ``text()``
that bind by name get the same query through ``to_named``, which rewrites
the placeholders to ``:p0, :p1, ...``.
"""

import re
from typing import Any, Dict, List, Mapping, Sequence, Tuple

POSITIONAL_PLACEHOLDER = re.compile(r"(?<![\w$])\$(\d+)(?!\w)")


def positional_placeholder(number: int) -> str:
    """Placeholder for the 1-based parameter ``number``."""
    return f"${number}"


def named_placeholder(index: int) -> str:
    """Placeholder for the 0-based parameter ``index`` in named style."""
    return f":p{index}"


def positional_parameters(params: Mapping[int, Any], param_counter: int) -> List[Any]:
    """
    Build the dense parameter list for positional placeholders.

    Args:
        params: Parameters keyed by 1-based position
        param_counter: Highest position assigned

    Returns:
        List where index i holds the value of ``$<i+1>``

    Examples:
        >>> positional_parameters({1: 10, 2: "John"}, 2)
        [10, 'John']
    """
    return [params[number] for number in range(1, param_counter + 1)]


def to_named(text: str, parameters: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite positional placeholders to named ones.

    ``$N`` becomes ``:p<N-1>`` for every N that has a parameter; other
    ``$`` sequences (dollar quoting, out-of-range numbers) are left alone.

    Args:
        text: Rendered SQL with ``$N`` placeholders
        parameters: Dense positional parameter list

    Returns:
        Tuple of (text with named placeholders, name to value mapping)

    Examples:
        >>> to_named("SELECT\\n  * FROM users WHERE id = $1", [7])
        ('SELECT\\n  * FROM users WHERE id = :p0', {'p0': 7})
    """

    def _replace(match: "re.Match[str]") -> str:
        number = int(match.group(1))
        if 1 <= number <= len(parameters):
            return named_placeholder(number - 1)
        return match.group(0)

    named_text = POSITIONAL_PLACEHOLDER.sub(_replace, text)
    named_params = {
        named_placeholder(i)[1:]: value for i, value in enumerate(parameters)
    }
    return named_text, named_params
