"""Exceptions raised by literal-sql.

Clause classification itself never fails: unrecognized text lands in the
WHERE bucket. Errors only come from templates that cannot be split into
segments and values, and from parameter objects that are ambiguous.
"""

from typing import Any, Dict, List


class LiteralSQLError(Exception):
    """Base class for all literal-sql errors."""


class TemplateError(LiteralSQLError, ValueError):
    """A template could not be split into literal segments and values."""


class ParameterObjectError(LiteralSQLError, TypeError):
    """A mapping was interpolated that does not hold exactly one parameter."""

    def __init__(self, keys: List[Any], message: str):
        self.keys = keys
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "ParameterObjectError",
            "keys": [str(k) for k in self.keys],
            "message": str(self),
        }
