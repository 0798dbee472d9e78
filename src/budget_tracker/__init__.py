"""Monthly budget tracker core.

Keyword categorization of income/expense transactions and a month-bucketed
transaction store with persistent, migration-safe storage.
"""

__version__ = "0.1.0"
