"""
SchemaManager - keeps several schema clients and fetched schemas side by side.

Useful when schemas for more than one language or version are needed at
the same time. Each client is registered under an identifier, and a schema
fetched through ``update_schema`` is stored under the same identifier.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .client import SchemaClient
from .schema import ItemSchema
from .utils import export_file, import_file

logger = logging.getLogger("tf2-schema")

Identifier = str | int


class SchemaManagerError(LookupError):
    """Raised when an identifier was never registered with the manager."""
    pass


class SchemaManagerOptions(BaseModel):
    """Options for a client created by the manager."""
    identifier: Identifier = Field(description="Key the client (and its schema) is stored under")
    version: str | None = Field(default=None, description="Schema API version")
    language: str | None = Field(default=None, description="Language code")


class SchemaManager:
    """
    Keyed stores of schema clients and item schemas.

    Only ``update_schema`` and ``update_schemas`` perform network I/O; every
    other method is a plain dictionary operation. The manager is not
    thread-safe; concurrent callers must serialize access themselves.
    """

    def __init__(
        self,
        api_key: str,
        clients: list[SchemaManagerOptions] | None = None,
        **client_kwargs: Any,
    ):
        """
        Initialize the manager.

        Args:
            api_key: Steam Web API key shared by the created clients
            clients: One entry per client to create
            **client_kwargs: Extra keyword arguments for every created
                             ``SchemaClient`` (timeout, parser, http_client...)
        """
        self._api_key = api_key
        self._client_kwargs = client_kwargs
        self._clients: dict[Identifier, SchemaClient] = {}
        self._schemas: dict[Identifier, ItemSchema] = {}

        for options in clients or []:
            self._clients[options.identifier] = self._create_client(options)

    def _create_client(self, options: SchemaManagerOptions) -> SchemaClient:
        return SchemaClient(self._api_key, options.version, options.language, **self._client_kwargs)

    # =========================================================================
    # Clients
    # =========================================================================

    def has_client(self, identifier: Identifier) -> bool:
        return identifier in self._clients

    def set_client(self, identifier: Identifier, client: SchemaClient) -> None:
        self._clients[identifier] = client

    def get_client(self, identifier: Identifier) -> SchemaClient:
        """
        Get a registered client.

        Raises:
            SchemaManagerError: If no client is registered under ``identifier``
        """
        try:
            return self._clients[identifier]
        except KeyError:
            raise SchemaManagerError(f"No client registered as {identifier!r}") from None

    def delete_client(self, identifier: Identifier) -> bool:
        """Remove a client. Returns False if it was not registered."""
        return self._clients.pop(identifier, None) is not None

    def get_clients(self) -> list[SchemaClient]:
        return list(self._clients.values())

    @property
    def client_ids(self) -> list[Identifier]:
        return list(self._clients.keys())

    # =========================================================================
    # Schemas
    # =========================================================================

    def has_schema(self, identifier: Identifier) -> bool:
        return identifier in self._schemas

    def set_schema(self, identifier: Identifier, schema: ItemSchema) -> None:
        self._schemas[identifier] = schema

    def get_schema(self, identifier: Identifier) -> ItemSchema:
        """
        Get a stored schema.

        Raises:
            SchemaManagerError: If no schema is stored under ``identifier``
        """
        try:
            return self._schemas[identifier]
        except KeyError:
            raise SchemaManagerError(f"No schema stored as {identifier!r}") from None

    def delete_schema(self, identifier: Identifier) -> bool:
        """Remove a schema. Returns False if it was not stored."""
        return self._schemas.pop(identifier, None) is not None

    def get_schemas(self) -> list[ItemSchema]:
        return list(self._schemas.values())

    @property
    def schema_ids(self) -> list[Identifier]:
        return list(self._schemas.keys())

    # =========================================================================
    # Fetching
    # =========================================================================

    async def update_schema(self, identifier: Identifier) -> ItemSchema:
        """
        Fetch a fresh schema with the client ``identifier`` and store it
        under the same identifier, replacing any previous schema.

        Raises:
            SchemaManagerError: If no client is registered under ``identifier``
            SteamError: If fetching fails; the stored schema is left unchanged
        """
        client = self.get_client(identifier)
        schema = await client.get_item_schema()
        self.set_schema(identifier, schema)
        logger.info(f"Updated schema {identifier!r}")
        return schema

    async def update_schemas(self) -> list[ItemSchema]:
        """Update the schemas of every registered client concurrently."""
        return list(await asyncio.gather(*(self.update_schema(i) for i in self.client_ids)))

    # =========================================================================
    # Persistence
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Convert both stores to a JSON-compatible document.

        Clients are stored as their options; the API key is not written.
        """
        return {
            "clients": [
                {"identifier": identifier, "version": client.version, "language": client.language}
                for identifier, client in self._clients.items()
            ],
            "schemas": [
                {"identifier": identifier, **schema.to_dict()}
                for identifier, schema in self._schemas.items()
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], api_key: str, **client_kwargs: Any) -> "SchemaManager":
        """Create from a document written by ``to_dict``."""
        clients = [SchemaManagerOptions.model_validate(c) for c in data.get("clients", [])]
        manager = cls(api_key, clients, **client_kwargs)

        for entry in data.get("schemas", []):
            manager.set_schema(entry["identifier"], ItemSchema.from_dict(entry))
        return manager

    def export(self, directory: str | Path, filename: str) -> Path:
        """Export clients and schemas to ``directory/filename.json``."""
        path = export_file(directory, filename, json.dumps(self.to_dict()))
        logger.info(f"Exported {len(self._clients)} clients and {len(self._schemas)} schemas to {path}")
        return path

    @classmethod
    def load(cls, path: str | Path, api_key: str, **client_kwargs: Any) -> "SchemaManager":
        """
        Import a manager exported with ``export``.

        Args:
            path: File written by ``export``
            api_key: API key for the recreated clients
            **client_kwargs: Extra keyword arguments for the recreated clients
        """
        manager = cls.from_dict(import_file(path), api_key, **client_kwargs)
        logger.info(f"Imported {len(manager.client_ids)} clients and {len(manager.schema_ids)} schemas from {path}")
        return manager
