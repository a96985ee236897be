"""
Unit tests for the SQLAlchemy adapter.
"""

import pytest

from literal_sql import sql
from literal_sql.adapters import to_text_clause


@pytest.mark.unit
class TestToTextClause:
    """Tests for to_text_clause."""

    def test_bound_parameters(self):
        query = sql("SELECT * FROM users").sql("WHERE id = {}", 1).sql("AND name = {}", "J")

        compiled = to_text_clause(query).compile()

        assert str(compiled) == "SELECT\n  * FROM users\nWHERE id = :p0\n  AND name = :p1"
        assert compiled.params == {"p0": 1, "p1": "J"}

    def test_no_parameters(self):
        clause = to_text_clause(sql("SELECT * FROM users"))

        assert str(clause) == "SELECT\n  * FROM users"
