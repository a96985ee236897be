"""
Clause keyword patterns.

Each pattern is matched case-insensitively at the start of a trimmed line or
fragment. Keywords must end on a word boundary so that ``ORDER BY`` never
matches the ``OR`` connective and ``selected`` never matches ``SELECT``.
"""

import re

SELECT = re.compile(r"select\b", re.IGNORECASE)
FROM = re.compile(r"from\b", re.IGNORECASE)
JOIN = re.compile(
    r"(?:(?:left|right|full)(?:\s+outer)?\s+|inner\s+|cross\s+)?join\b",
    re.IGNORECASE,
)
WHERE = re.compile(r"where\b", re.IGNORECASE)
GROUP_BY = re.compile(r"group\s+by\b", re.IGNORECASE)
ORDER_BY = re.compile(r"order\s+by\b", re.IGNORECASE)
LIMIT = re.compile(r"limit\b", re.IGNORECASE)
OFFSET = re.compile(r"offset\b", re.IGNORECASE)
AND = re.compile(r"and\b", re.IGNORECASE)
OR = re.compile(r"or\b", re.IGNORECASE)


def remainder(pattern: "re.Pattern[str]", text: str) -> str:
    """Return ``text`` after the keyword ``pattern`` matched, trimmed."""
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"{text!r} does not start with {pattern.pattern!r}")
    return text[match.end():].strip()
