"""Table construction helpers."""

from .tables import as_table, tabulate

__all__ = ["as_table", "tabulate"]
