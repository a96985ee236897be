"""
Driver adapters for named-parameter consumers.

The positional form (``query.query``, ``query.parameters``) goes straight to
psycopg-style drivers. SQLAlchemy binds by name, so the query is rewritten
to ``:p0, :p1, ...`` placeholders and bound into a ``TextClause``.

Example:
    >>> from sqlalchemy import create_engine
    >>> clause = to_text_clause(sql("SELECT * FROM users WHERE id = {}", 1))
    >>> with create_engine(url).connect() as connection:
    ...     rows = connection.execute(clause).fetchall()
"""

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from literal_sql.query import QueryState


def to_text_clause(query: QueryState) -> TextClause:
    """
    Convert a query into a SQLAlchemy ``TextClause`` with bound parameters.

    Args:
        query: Query to convert

    Returns:
        TextClause whose bind parameters are ``p0, p1, ...``
    """
    named_text, named_params = query.to_named()
    clause = text(named_text)
    if named_params:
        clause = clause.bindparams(**named_params)
    return clause
