"""
literal-sql: compose raw SQL incrementally from format-style templates.

Values embedded in a template become positional ``$N`` parameters, so user
input never lands in the SQL text. Clauses can be added one call at a time;
each call returns a new query and leaves the original untouched.

Usage:
    >>> from literal_sql import sql
    >>> query = sql("SELECT * FROM users")
    >>> if user_id:
    ...     query = query.sql("WHERE user_id = {}", user_id)
    >>> cursor.execute(query.query, query.parameters)
"""

from literal_sql.core.interpolation import Raw, SQLTemplate
from literal_sql.errors import LiteralSQLError, ParameterObjectError, TemplateError
from literal_sql.query import QueryState, parse, sql

__version__ = "0.1.0"

__all__ = [
    "sql",
    "parse",
    "QueryState",
    "Raw",
    "SQLTemplate",
    "LiteralSQLError",
    "TemplateError",
    "ParameterObjectError",
    "__version__",
]
