"""Tests for SchemaManager."""

import json
from unittest.mock import AsyncMock

import pytest

from tf2_schema import ItemSchema, SchemaClient, SchemaManager, SchemaManagerError, SchemaManagerOptions
from tf2_schema.errors import SteamError


@pytest.fixture
def manager() -> SchemaManager:
    return SchemaManager("test-key", [
        SchemaManagerOptions(identifier="en", language="en"),
        SchemaManagerOptions(identifier=2, version="v0001", language="da"),
    ])


class TestClients:

    def test_clients_created_from_options(self, manager):
        assert manager.has_client("en")
        assert manager.has_client(2)
        assert manager.get_client(2).language == "da"
        assert len(manager.get_clients()) == 2

    def test_set_and_delete_client(self, manager):
        client = SchemaClient("other-key", language="de")
        manager.set_client("de", client)

        assert manager.get_client("de") is client
        assert manager.delete_client("de") is True
        assert manager.delete_client("de") is False
        assert not manager.has_client("de")

    def test_get_unknown_client_raises(self, manager):
        with pytest.raises(SchemaManagerError):
            manager.get_client("fr")

    def test_manager_error_is_lookup_error(self, manager):
        with pytest.raises(LookupError):
            manager.get_client("fr")

    def test_empty_manager(self):
        manager = SchemaManager("test-key")
        assert manager.get_clients() == []
        assert manager.get_schemas() == []


class TestSchemas:

    def test_set_get_delete(self, manager, schema):
        assert not manager.has_schema("en")

        manager.set_schema("en", schema)

        assert manager.has_schema("en")
        assert manager.get_schema("en") is schema
        assert manager.get_schemas() == [schema]
        assert manager.delete_schema("en") is True
        assert manager.delete_schema("en") is False

    def test_get_unknown_schema_raises(self, manager):
        with pytest.raises(SchemaManagerError):
            manager.get_schema("en")


class TestUpdateSchema:

    @pytest.mark.asyncio
    async def test_update_replaces_schema(self, manager, schema):
        old = object()
        manager.set_schema("en", old)
        manager.get_client("en").get_item_schema = AsyncMock(return_value=schema)

        result = await manager.update_schema("en")

        assert result is schema
        assert manager.get_schema("en") is schema

    @pytest.mark.asyncio
    async def test_update_unknown_client_raises(self, manager):
        with pytest.raises(SchemaManagerError):
            await manager.update_schema("fr")

    @pytest.mark.asyncio
    async def test_failed_update_keeps_previous_schema(self, manager, schema):
        manager.set_schema("en", schema)
        manager.get_client("en").get_item_schema = AsyncMock(side_effect=SteamError.from_status(502))

        with pytest.raises(SteamError):
            await manager.update_schema("en")

        assert manager.get_schema("en") is schema

    @pytest.mark.asyncio
    async def test_update_schemas_refreshes_every_client(self, manager, schema):
        for client in manager.get_clients():
            client.get_item_schema = AsyncMock(return_value=schema)

        schemas = await manager.update_schemas()

        assert len(schemas) == 2
        assert manager.has_schema("en")
        assert manager.has_schema(2)


class TestManagerExportImport:

    def test_round_trip(self, manager, schema, tmp_path):
        manager.set_schema("en", schema)
        manager.set_schema(2, schema)

        path = manager.export(tmp_path, "manager")
        restored = SchemaManager.load(path, "test-key")

        assert path.name == "manager.json"
        assert restored.client_ids == ["en", 2]
        assert restored.get_client(2).language == "da"
        assert restored.schema_ids == ["en", 2]
        restored_schema = restored.get_schema("en")
        assert isinstance(restored_schema, ItemSchema)
        assert restored_schema.get_item_by_defindex(575).item_name == "Infernal Impaler"
        assert restored_schema.to_dict() == schema.to_dict()

    def test_api_key_not_exported(self, manager, tmp_path):
        path = manager.export(tmp_path, "manager.json")
        assert "test-key" not in path.read_text(encoding="utf-8")

    def test_export_document_shape(self, manager, schema):
        manager.set_schema("en", schema)
        document = json.loads(json.dumps(manager.to_dict()))

        assert document["clients"][0] == {"identifier": "en", "version": "v0001", "language": "en"}
        assert document["schemas"][0]["identifier"] == "en"
        assert set(document["schemas"][0]) == {"identifier", "schema", "options"}
