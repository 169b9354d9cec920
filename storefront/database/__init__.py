from storefront.database.async_db import Database, create_async_database_engine
from storefront.database.transactions import is_transient_error, run_in_transaction

__all__ = [
    "Database",
    "create_async_database_engine",
    "is_transient_error",
    "run_in_transaction",
]
