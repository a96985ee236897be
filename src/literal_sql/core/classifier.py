"""
Fragment classifier.

Routes one short SQL fragment (``WHERE x = $1``, ``LEFT JOIN ...``,
``LIMIT 10``) into its clause bucket. Dispatch is an ordered rule table:
rules are tried in ``FRAGMENT_RULES`` order and the first match wins. Text
that matches no rule is an implicit WHERE condition joined with AND.
"""

import re
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from literal_sql.core import keywords
from literal_sql.core.clauses import Clauses
from literal_sql.core.parser import parse_statement
from literal_sql.utils.logging import get_logger

logger = get_logger(__name__)


def _add_condition(clauses: Clauses, condition: str, connective: str) -> Clauses:
    """Append a WHERE condition, prefixing ``connective`` unless it is the first."""
    if clauses.where:
        condition = f"{connective} {condition}"
    return replace(clauses, where=clauses.where + (condition,))


def _select(clauses: Clauses, fragment: str) -> Clauses:
    return parse_statement(clauses, fragment)


def _from(clauses: Clauses, fragment: str) -> Clauses:
    return replace(clauses, from_=keywords.remainder(keywords.FROM, fragment))


def _join(clauses: Clauses, fragment: str) -> Clauses:
    return replace(clauses, joins=clauses.joins + (fragment,))


def _where(clauses: Clauses, fragment: str) -> Clauses:
    condition = keywords.remainder(keywords.WHERE, fragment)
    return replace(clauses, where=clauses.where + (condition,))


def _group_by(clauses: Clauses, fragment: str) -> Clauses:
    expression = keywords.remainder(keywords.GROUP_BY, fragment)
    return replace(clauses, group_by=clauses.group_by + (expression,))


def _order_by(clauses: Clauses, fragment: str) -> Clauses:
    expression = keywords.remainder(keywords.ORDER_BY, fragment)
    return replace(clauses, order_by=clauses.order_by + (expression,))


def _and(clauses: Clauses, fragment: str) -> Clauses:
    return _add_condition(clauses, keywords.remainder(keywords.AND, fragment), "AND")


def _or(clauses: Clauses, fragment: str) -> Clauses:
    return _add_condition(clauses, keywords.remainder(keywords.OR, fragment), "OR")


def _limit(clauses: Clauses, fragment: str) -> Clauses:
    return replace(clauses, limit=keywords.remainder(keywords.LIMIT, fragment))


def _offset(clauses: Clauses, fragment: str) -> Clauses:
    return replace(clauses, offset=keywords.remainder(keywords.OFFSET, fragment))


@dataclass(frozen=True)
class ClauseRule:
    """A keyword pattern and the transition applied when it matches."""

    name: str
    pattern: "re.Pattern[str]"
    apply: Callable[[Clauses, str], Clauses]

    def matches(self, fragment: str) -> bool:
        return self.pattern.match(fragment) is not None


# Most specific first: a full statement, then clause keywords, then the
# boolean connectives.
FRAGMENT_RULES: Tuple[ClauseRule, ...] = (
    ClauseRule("select", keywords.SELECT, _select),
    ClauseRule("from", keywords.FROM, _from),
    ClauseRule("join", keywords.JOIN, _join),
    ClauseRule("where", keywords.WHERE, _where),
    ClauseRule("group_by", keywords.GROUP_BY, _group_by),
    ClauseRule("order_by", keywords.ORDER_BY, _order_by),
    ClauseRule("and", keywords.AND, _and),
    ClauseRule("or", keywords.OR, _or),
    ClauseRule("limit", keywords.LIMIT, _limit),
    ClauseRule("offset", keywords.OFFSET, _offset),
)


def match_rule(fragment: str) -> Optional[ClauseRule]:
    """Return the first rule matching the trimmed ``fragment``, if any."""
    for rule in FRAGMENT_RULES:
        if rule.matches(fragment):
            return rule
    return None


def classify_fragment(clauses: Clauses, fragment: str) -> Clauses:
    """
    Route one fragment into its bucket.

    Args:
        clauses: Buckets before the fragment
        fragment: Clause text, keyword included

    Returns:
        New Clauses with the fragment applied; unchanged for blank fragments

    Examples:
        >>> base = Clauses(where=("id = 1",))
        >>> classify_fragment(base, "name = 'John'").where
        ('id = 1', "AND name = 'John'")
    """
    fragment = fragment.strip()
    if not fragment:
        return clauses

    rule = match_rule(fragment)
    if rule is None:
        logger.debug("classifier.fragment_routed", rule="implicit_where")
        return _add_condition(clauses, fragment, "AND")

    logger.debug("classifier.fragment_routed", rule=rule.name)
    return rule.apply(clauses, fragment)
