"""
Renderer for clause buckets.

Serializes ``Clauses`` into canonical, indented SQL text. Blocks are emitted
in the fixed order SELECT, FROM, JOINS, WHERE, GROUP BY, ORDER BY, LIMIT,
OFFSET and joined with newlines. WHERE connectives are already part of the
stored conditions, so none are inserted here.
"""

from typing import Iterable, List, Optional

from literal_sql.core.clauses import Clauses

# Left in the text by a named placeholder that never received a value
UNRESOLVED_MARKER = ":undefined"

INDENT = "  "


def _valid_expressions(expressions: Iterable[str]) -> List[str]:
    return [
        expression
        for expression in expressions
        if expression and expression != "," and UNRESOLVED_MARKER not in expression
    ]


def _is_resolved(value: Optional[str]) -> bool:
    return value is not None and UNRESOLVED_MARKER not in value


def render(clauses: Clauses) -> str:
    """
    Render clause buckets as SQL text.

    Args:
        clauses: Buckets to render

    Returns:
        Formatted SQL string

    Examples:
        >>> print(render(Clauses(select=("id", "name"), from_="users")))
        SELECT
          id,
          name
        FROM users
    """
    blocks: List[str] = []

    if clauses.select:
        blocks.append(f"SELECT\n{INDENT}" + f",\n{INDENT}".join(clauses.select))
    else:
        blocks.append("SELECT *")

    if clauses.from_:
        blocks.append(f"FROM {clauses.from_}")

    if clauses.joins:
        blocks.append("\n".join(clauses.joins))

    if clauses.where:
        blocks.append("WHERE " + f"\n{INDENT}".join(clauses.where))

    group_by = _valid_expressions(clauses.group_by)
    if group_by:
        blocks.append("GROUP BY " + ", ".join(group_by))

    order_by = _valid_expressions(clauses.order_by)
    if order_by:
        blocks.append("ORDER BY " + ", ".join(order_by))

    if _is_resolved(clauses.limit):
        blocks.append(f"LIMIT {clauses.limit}")

    if _is_resolved(clauses.offset):
        blocks.append(f"OFFSET {clauses.offset}")

    return "\n".join(blocks)
