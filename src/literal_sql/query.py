"""
Immutable SQL query values.

``sql()`` builds a ``QueryState`` from a full statement; ``QueryState.sql()``
derives a new one with one more clause. A QueryState is never modified after
construction, so a base query can be extended along independent branches,
from any number of threads, without copying it first.

Example:
    >>> from literal_sql import sql
    >>> query = sql("SELECT * FROM products")
    >>> query = query.sql("WHERE category = {}", "books")
    >>> query = query.sql("AND price >= {}", 10)
    >>> print(query)
    SELECT
      * FROM products
    WHERE category = $1
      AND price >= $2
    >>> query.parameters
    ['books', 10]
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from literal_sql.core.classifier import classify_fragment
from literal_sql.core.clauses import EMPTY_CLAUSES, Clauses
from literal_sql.core.interpolation import Raw, interpolate, to_template
from literal_sql.core.parameters import positional_parameters, to_named
from literal_sql.core.parser import parse_statement
from literal_sql.core.renderer import render


@dataclass(frozen=True)
class QueryState:
    """
    A parsed query: clause buckets plus positional parameters.

    Attributes:
        clauses: Clause buckets
        params: Read-only parameters keyed 1..param_counter
        param_counter: Highest parameter number assigned so far
    """

    clauses: Clauses = EMPTY_CLAUSES
    params: Mapping[int, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    param_counter: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.params, MappingProxyType):
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        if set(self.params) != set(range(1, self.param_counter + 1)):
            raise ValueError(
                f"params must be keyed 1..{self.param_counter}, got {sorted(self.params)}"
            )

    def _interpolate(self, template: Any, args: Tuple[Any, ...], kwargs: Dict[str, Any]):
        return interpolate(
            to_template(template, args, kwargs),
            self.params,
            self.param_counter,
            inline_types=(Raw, QueryState),
        )

    def sql(self, template: Any, *args: Any, **kwargs: Any) -> "QueryState":
        """
        Return a new query with one fragment added.

        The fragment is interpolated (values become ``$N`` parameters numbered
        after this query's), then routed to its clause by keyword. A fragment
        without a keyword is an extra WHERE condition joined with AND.

        Args:
            template: Format-style string, SQLTemplate or template string
            *args: Positional values for ``{}`` fields
            **kwargs: Keyword values for ``{name}`` fields

        Returns:
            New QueryState; this one is left unchanged
        """
        result = self._interpolate(template, args, kwargs)
        return QueryState(
            clauses=classify_fragment(self.clauses, result.text),
            params=result.params,
            param_counter=result.param_counter,
        )

    @property
    def query(self) -> str:
        """The rendered SQL text."""
        return render(self.clauses)

    @property
    def parameters(self) -> List[Any]:
        """Parameter values in placeholder order: index i holds ``$<i+1>``."""
        return positional_parameters(self.params, self.param_counter)

    def to_named(self) -> Tuple[str, Dict[str, Any]]:
        """Render with ``:p0, :p1, ...`` placeholders and a name to value mapping."""
        return to_named(self.query, self.parameters)

    def __str__(self) -> str:
        return self.query


def sql(template: Any = "", *args: Any, **kwargs: Any) -> QueryState:
    """
    Build a query from a complete statement.

    Example:
        >>> query = sql("SELECT * FROM users WHERE id = {}", 1)
        >>> query.query
        'SELECT\\n  * FROM users WHERE id = $1'
        >>> query.parameters
        [1]
    """
    result = QueryState()._interpolate(template, args, kwargs)
    return QueryState(
        clauses=parse_statement(EMPTY_CLAUSES, result.text),
        params=result.params,
        param_counter=result.param_counter,
    )


def parse(statement: str) -> QueryState:
    """Build a query from plain statement text, without interpolation."""
    return QueryState(clauses=parse_statement(EMPTY_CLAUSES, statement))
