"""
Database statistics and reporting utilities.
"""

import os

from .logger import log
from .queries import select_count
from .schema import ALL_TABLES, RELATION_TABLES


def table_counts(database, tables=None):
    counts = {}
    for table in tables or ALL_TABLES + RELATION_TABLES:
        if database.table_exists(table):
            counts[table] = database.select_single_row(select_count(table))["c"]
    return counts


def report_stats(database, tables=None):
    """Log row counts per table and the database file size."""
    counts = table_counts(database, tables)

    file_size_bytes = os.path.getsize(database.db_path)
    file_size_mb = file_size_bytes / (1024 * 1024)

    log.info("database_statistics", size_mb=round(file_size_mb, 2), **counts)
    return counts
