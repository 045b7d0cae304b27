"""Product store with configurable backend.

Supports two backends:
- sqlite: Local SQLite file (development)
- cosmosdb: Azure Cosmos DB (production)

Backend is selected via the store.backend config value. Every operation
addresses a single item by ProductId; store failures are re-raised as
StoreError with the original message.
"""

import logging
import sqlite3
from typing import Any, Optional

from azure.core.exceptions import AzureError
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from ..clients import CosmosDBClient, SqliteClient
from ..config import get_config
from ..exceptions import ProductNotFoundError, StoreError
from ..models import ITEM_ATTRIBUTES, Product

logger = logging.getLogger(__name__)

MUTABLE_ATTRIBUTES = ("Name", "Description", "Price", "Category", "Stock")

# Surfaced as StoreError; sqlite3 raises OverflowError for integers beyond int64
STORE_ERRORS = (sqlite3.Error, OverflowError, AzureError)


class ProductStore:
    """Single-table product store keyed by ProductId.

    Create once per process and share across handler invocations.
    Supports async context manager pattern for resource cleanup.
    """

    def __init__(
        self,
        backend: Optional[str] = None,
        table_name: Optional[str] = None,
        sqlite_path: Optional[str] = None,
        cosmosdb_client: Optional[CosmosDBClient] = None,
    ):
        """Initialize the product store.

        Arguments not given are taken from the application config.

        Args:
            backend: "sqlite" or "cosmosdb".
            table_name: SQLite table name (the Cosmos DB container name comes from the client).
            sqlite_path: Path to the SQLite database file.
            cosmosdb_client: Pre-built Cosmos DB client, mainly for tests.

        Raises:
            ValueError: If the backend is unknown.
        """
        needs_config = backend is None or (backend == "sqlite" and None in (table_name, sqlite_path))
        if needs_config:
            config = get_config()
            backend = backend or config.store.backend
            table_name = table_name or config.store.table_name
            sqlite_path = sqlite_path or config.store.sqlite_path

        self._backend = backend
        self._table_name = table_name
        self._sqlite_path = sqlite_path
        self._sqlite_client: Optional[SqliteClient] = None
        self._cosmosdb_client: Optional[CosmosDBClient] = cosmosdb_client

        if self._backend == "sqlite":
            logger.info(f"ProductStore using SQLite backend: {sqlite_path} (table {table_name})")
        elif self._backend == "cosmosdb":
            if self._cosmosdb_client is None:
                self._cosmosdb_client = self._build_cosmosdb_client()
            logger.info("ProductStore using CosmosDB backend")
        else:
            raise ValueError(f"Unknown store backend: {self._backend}")

    @staticmethod
    def _build_cosmosdb_client() -> CosmosDBClient:
        config = get_config()
        if config.cosmosdb is None:
            raise ValueError("CosmosDB backend selected but cosmosdb config is missing")
        return CosmosDBClient(
            endpoint=config.cosmosdb.endpoint,
            key=config.cosmosdb.key,
            database_name=config.cosmosdb.database_name,
            container_name=config.store.table_name,
            partition_key_path=config.cosmosdb.partition_key_path,
        )

    @property
    def backend(self) -> str:
        return self._backend

    async def connect(self) -> None:
        """Open the backend connection and ensure the table exists."""
        try:
            if self._backend == "sqlite":
                self._sqlite_client = SqliteClient(self._sqlite_path)
                self._ensure_table_exists()
            else:
                await self._cosmosdb_client.connect()
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e

    async def close(self) -> None:
        """Close the backend connection."""
        if self._sqlite_client is not None:
            self._sqlite_client.close()
            self._sqlite_client = None
        if self._cosmosdb_client is not None:
            await self._cosmosdb_client.close()

    async def __aenter__(self) -> "ProductStore":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.close()
        return False

    def _ensure_table_exists(self) -> None:
        self._sqlite().execute_query(
            f"""CREATE TABLE IF NOT EXISTS "{self._table_name}" (
                ProductId TEXT PRIMARY KEY,
                Name TEXT NOT NULL,
                Description TEXT,
                Price REAL NOT NULL,
                Category TEXT NOT NULL,
                Stock INTEGER NOT NULL,
                CreatedAt TEXT NOT NULL,
                UpdatedAt TEXT NOT NULL
            )"""
        )
        logger.debug(f"Product table {self._table_name} initialized")

    def _sqlite(self) -> SqliteClient:
        if self._sqlite_client is None:
            raise RuntimeError("ProductStore not connected. Call connect() first.")
        return self._sqlite_client

    # --- Operations ---

    async def put(self, item: dict[str, Any]) -> None:
        """Write the full item, overwriting any existing item with the same ProductId."""
        try:
            if self._backend == "sqlite":
                columns = ", ".join(ITEM_ATTRIBUTES)
                placeholders = ", ".join("?" for _ in ITEM_ATTRIBUTES)
                self._sqlite().execute_query(
                    f'INSERT OR REPLACE INTO "{self._table_name}" ({columns}) VALUES ({placeholders})',
                    tuple(item.get(name) for name in ITEM_ATTRIBUTES),
                )
            else:
                await self._cosmosdb_client.upsert_item({**item, "id": item["ProductId"]})
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e

    async def get(self, product_id: str) -> Optional[dict[str, Any]]:
        """Read one item.

        Returns:
            The stored item, or None if no item has this ProductId.
        """
        try:
            if self._backend == "sqlite":
                rows = self._sqlite().execute_query(
                    f'SELECT * FROM "{self._table_name}" WHERE ProductId = ?',
                    (product_id,),
                )
                if not rows:
                    return None
                raw = dict(rows[0])
            else:
                try:
                    raw = await self._cosmosdb_client.read_item(product_id, partition_key=product_id)
                except CosmosResourceNotFoundError:
                    return None
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e

        return Product.from_item(raw).to_item()

    async def update(
        self,
        product_id: str,
        fields: dict[str, Any],
        timestamp: str,
    ) -> dict[str, Any]:
        """Overwrite the mutable attributes and UpdatedAt of an existing item.

        Args:
            product_id: Key of the item to update.
            fields: Values for Name, Description, Price, Category and Stock.
            timestamp: New UpdatedAt value.

        Returns:
            The item as stored after the update.

        Raises:
            ProductNotFoundError: If no item has this ProductId.
        """
        values = {name: fields.get(name) for name in MUTABLE_ATTRIBUTES}
        values["UpdatedAt"] = timestamp

        try:
            if self._backend == "sqlite":
                assignments = ", ".join(f"{name} = ?" for name in values)
                self._sqlite().execute_query(
                    f'UPDATE "{self._table_name}" SET {assignments} WHERE ProductId = ?',
                    (*values.values(), product_id),
                )
                rows = self._sqlite().execute_query(
                    f'SELECT * FROM "{self._table_name}" WHERE ProductId = ?',
                    (product_id,),
                )
                if not rows:
                    raise ProductNotFoundError(product_id)
                raw = dict(rows[0])
            else:
                operations = [
                    {"op": "set", "path": f"/{name}", "value": value}
                    for name, value in values.items()
                ]
                try:
                    raw = await self._cosmosdb_client.patch_item(
                        product_id,
                        partition_key=product_id,
                        patch_operations=operations,
                    )
                except CosmosResourceNotFoundError as e:
                    raise ProductNotFoundError(product_id) from e
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e

        return Product.from_item(raw).to_item()

    async def delete(self, product_id: str) -> None:
        """Remove the item if present. Deleting an absent item succeeds."""
        try:
            if self._backend == "sqlite":
                self._sqlite().execute_query(
                    f'DELETE FROM "{self._table_name}" WHERE ProductId = ?',
                    (product_id,),
                )
            else:
                try:
                    await self._cosmosdb_client.delete_item(product_id, partition_key=product_id)
                except CosmosResourceNotFoundError:
                    logger.debug(f"Delete of absent product {product_id} ignored")
        except STORE_ERRORS as e:
            raise StoreError(str(e)) from e
