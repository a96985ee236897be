"""Command-line interface for literal-sql."""
