"""Unify KEN_ALL.CSV and JIGYOSYO.CSV into one 22-column postal table."""

__version__ = "0.1.0"
