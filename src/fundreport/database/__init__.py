"""Database layer for fundreport."""

from fundreport.database.base import (
    Database,
    OrganizationProfileRepository,
    ReportTransactionRepository,
)
from fundreport.database.factories import create_sqlite_database

__all__ = [
    "Database",
    "OrganizationProfileRepository",
    "ReportTransactionRepository",
    "create_sqlite_database",
]
