"""
CLI for building a query from a base statement and clause flags.

Clause flags are applied in command-line order, each one as the fragment
``<KEYWORD> <value>``.

Usage:
    # Read query from a file and add conditions
    literal-sql --file query.sql --where "active = true" --and "created_at > '2023-01-01'"

    # Build a query from a literal statement
    python -m literal_sql.cli --query "SELECT * FROM users" --where "id > 100" \
        --order-by "created_at DESC" --limit 10
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from literal_sql.core.interpolation import SQLTemplate
from literal_sql.errors import LiteralSQLError
from literal_sql.query import QueryState, parse
from literal_sql.utils.logging import get_logger

logger = get_logger(__name__)

# (flag, keyword, metavar, help)
CLAUSE_FLAGS: Tuple[Tuple[str, str, str, str], ...] = (
    ("--where", "WHERE", "CONDITION", "Add a WHERE clause"),
    ("--and", "AND", "CONDITION", "Add an AND condition to the WHERE clause"),
    ("--or", "OR", "CONDITION", "Add an OR condition to the WHERE clause"),
    ("--join", "JOIN", "TEXT", "Add a JOIN clause"),
    ("--left-join", "LEFT JOIN", "TEXT", "Add a LEFT JOIN clause"),
    ("--right-join", "RIGHT JOIN", "TEXT", "Add a RIGHT JOIN clause"),
    ("--inner-join", "INNER JOIN", "TEXT", "Add an INNER JOIN clause"),
    ("--group-by", "GROUP BY", "EXPR", "Add a GROUP BY clause"),
    ("--order-by", "ORDER BY", "EXPR", "Add an ORDER BY clause"),
    ("--limit", "LIMIT", "NUMBER", "Add a LIMIT clause"),
    ("--offset", "OFFSET", "NUMBER", "Add an OFFSET clause"),
)


class AppendClause(argparse.Action):
    """Collect ``(keyword, value)`` pairs from every clause flag into one list."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        clauses = list(getattr(namespace, self.dest, None) or [])
        clauses.append((self.const, values))
        setattr(namespace, self.dest, clauses)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="literal-sql",
        description="literal-sql CLI - build a SQL query clause by clause",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Read query from a file and add conditions
  literal-sql --file query.sql --where "active = true" --and "created_at > '2023-01-01'"

  # Build a query from a literal statement
  literal-sql --query "SELECT * FROM users" --where "id > 100" --order-by "created_at DESC" --limit 10
        """,
    )

    parser.add_argument("-f", "--file", help="Read base SQL query from FILE", metavar="FILE")
    parser.add_argument("-q", "--query", help="Specify SQL query directly", metavar="QUERY")

    for flag, keyword, metavar, help_text in CLAUSE_FLAGS:
        parser.add_argument(
            flag,
            action=AppendClause,
            dest="clauses",
            const=keyword,
            metavar=metavar,
            help=help_text,
        )

    parser.set_defaults(clauses=[])
    return parser


def build_query(base: str, clauses: Sequence[Tuple[str, str]]) -> QueryState:
    """
    Parse ``base`` and apply each ``(keyword, value)`` clause in order.

    Values are taken literally: braces in them are not replacement fields.

    Args:
        base: Base statement text
        clauses: Clause keyword and value pairs

    Returns:
        The resulting query
    """
    query = parse(base)
    for keyword, value in clauses:
        query = query.sql(SQLTemplate((f"{keyword} {value}",)))

    logger.debug("cli.query_built", clauses=len(clauses))
    return query


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file and not args.query:
        parser.print_help()
        return 0

    if args.file:
        try:
            base = Path(args.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("cli.file_read_failed", path=args.file, error=str(e))
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1
    else:
        base = args.query

    try:
        query = build_query(base, args.clauses)
    except LiteralSQLError as e:
        logger.error("cli.build_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(query.query)

    parameters = query.parameters
    if parameters:
        print("\nParameters:")
        print(json.dumps(parameters, indent=2, default=str))

    return 0


if __name__ == "__main__":
    sys.exit(main())
