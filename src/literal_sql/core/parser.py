"""
Line-based parser for complete SQL statements.

Walks a statement line by line. A line starting with a clause keyword opens
that clause; any other line continues the clause currently open. The open
clause is an explicit ``Section`` value threaded through the loop, so each
step is a pure ``(clauses, section, line) -> (clauses, section)`` transition.
"""

import re
from dataclasses import replace
from typing import Tuple

from literal_sql.core import keywords
from literal_sql.core.clauses import Clauses, Section
from literal_sql.utils.logging import get_logger

logger = get_logger(__name__)

_LEADING_COMMA = re.compile(r"^,\s*")
_TRAILING_COMMA = re.compile(r",\s*$")
_COMMA_ONLY = re.compile(r"^\s*,\s*$")


def _clean_select_field(line: str) -> str:
    """Strip one leading and one trailing comma from a SELECT field line."""
    if _COMMA_ONLY.match(line):
        return ""
    return _TRAILING_COMMA.sub("", _LEADING_COMMA.sub("", line))


def _open_clause(
    clauses: Clauses, section: Section, line: str
) -> Tuple[Clauses, Section, bool]:
    """
    Apply a keyword line. The flag is False when ``line`` has no keyword.

    LIMIT and OFFSET replace their value but leave ``section`` open.
    """
    if keywords.SELECT.match(line):
        fields = _clean_select_field(keywords.remainder(keywords.SELECT, line))
        return replace(clauses, select=(fields,) if fields else ()), Section.SELECT, True
    if keywords.FROM.match(line):
        return (
            replace(clauses, from_=keywords.remainder(keywords.FROM, line)),
            Section.FROM,
            True,
        )
    if keywords.JOIN.match(line):
        return replace(clauses, joins=clauses.joins + (line,)), Section.JOINS, True
    if keywords.WHERE.match(line):
        condition = keywords.remainder(keywords.WHERE, line)
        return replace(clauses, where=clauses.where + (condition,)), Section.WHERE, True
    if keywords.GROUP_BY.match(line):
        expression = keywords.remainder(keywords.GROUP_BY, line)
        return (
            replace(clauses, group_by=clauses.group_by + (expression,)),
            Section.GROUP_BY,
            True,
        )
    if keywords.ORDER_BY.match(line):
        expression = keywords.remainder(keywords.ORDER_BY, line)
        return (
            replace(clauses, order_by=clauses.order_by + (expression,)),
            Section.ORDER_BY,
            True,
        )
    if keywords.LIMIT.match(line):
        return (
            replace(clauses, limit=keywords.remainder(keywords.LIMIT, line)),
            section,
            True,
        )
    if keywords.OFFSET.match(line):
        return (
            replace(clauses, offset=keywords.remainder(keywords.OFFSET, line)),
            section,
            True,
        )
    return clauses, Section.NONE, False


def _continue_clause(clauses: Clauses, section: Section, line: str) -> Clauses:
    """Append a keyword-less line to the clause that is open."""
    if section is Section.SELECT:
        field = _clean_select_field(line)
        if not field:
            return clauses
        return replace(clauses, select=clauses.select + (field,))
    if section is Section.WHERE:
        return replace(clauses, where=clauses.where + (line,))
    if section is Section.GROUP_BY:
        return replace(clauses, group_by=clauses.group_by + (line,))
    if section is Section.ORDER_BY:
        return replace(clauses, order_by=clauses.order_by + (line,))

    logger.debug("parser.line_dropped", section=section.value, line=line)
    return clauses


def parse_line(
    clauses: Clauses, section: Section, line: str
) -> Tuple[Clauses, Section]:
    """
    Apply one trimmed, non-empty line.

    Args:
        clauses: Buckets before the line
        section: Clause open before the line
        line: The line itself

    Returns:
        Tuple of (buckets after the line, clause open after the line)
    """
    updated, opened, matched = _open_clause(clauses, section, line)
    if matched:
        return updated, opened
    return _continue_clause(clauses, section, line), section


def parse_statement(clauses: Clauses, statement: str) -> Clauses:
    """
    Parse a complete SQL statement into ``clauses``.

    Lines are trimmed and empty lines skipped. Multi-line SELECT field lists
    with leading or trailing commas collapse into the same buckets as their
    comma-free equivalent.

    Args:
        clauses: Buckets to start from (usually empty)
        statement: Full statement text

    Returns:
        New Clauses with the statement's buckets applied

    Examples:
        >>> parse_statement(Clauses(), "SELECT\\n  , id\\n  , name\\nFROM users").select
        ('id', 'name')
    """
    lines = [line.strip() for line in statement.split("\n")]
    section = Section.NONE
    for line in lines:
        if line:
            clauses, section = parse_line(clauses, section, line)

    logger.debug(
        "parser.statement_parsed",
        lines=sum(1 for line in lines if line),
        select_fields=len(clauses.select),
        where_conditions=len(clauses.where),
    )
    return clauses
