"""
Clause buckets of a query.

A ``Clauses`` value holds one bucket per SQL clause. It is frozen and every
bucket is a tuple, so deriving a new value with ``dataclasses.replace``
never shares mutable storage with the original.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Section(str, Enum):
    """Clause the line scanner is currently inside of."""

    NONE = "none"
    SELECT = "select"
    FROM = "from"
    JOINS = "joins"
    WHERE = "where"
    GROUP_BY = "group_by"
    ORDER_BY = "order_by"


@dataclass(frozen=True)
class Clauses:
    """
    Structured SQL clause buckets.

    Attributes:
        select: Field expressions in render order; empty means ``*``
        from_: Table expression
        joins: Full join clauses, each carrying its own JOIN keyword
        where: Conditions; entries after the first carry their connective
        group_by: GROUP BY expressions
        order_by: ORDER BY expressions
        limit: LIMIT value kept as text
        offset: OFFSET value kept as text
    """

    select: Tuple[str, ...] = ()
    from_: Optional[str] = None
    joins: Tuple[str, ...] = ()
    where: Tuple[str, ...] = ()
    group_by: Tuple[str, ...] = ()
    order_by: Tuple[str, ...] = ()
    limit: Optional[str] = None
    offset: Optional[str] = None


EMPTY_CLAUSES = Clauses()
