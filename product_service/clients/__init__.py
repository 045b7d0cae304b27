"""Client modules for external services."""

from product_service.clients.sqlite_client import SqliteClient
from product_service.clients.cosmosdb_client import CosmosDBClient

__all__ = [
    "SqliteClient",
    "CosmosDBClient",
]
