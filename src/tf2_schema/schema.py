"""
The assembled TF2 item schema and its query operations.

An ``ItemSchema`` holds the item definitions, the parsed client schema and
the overview tables for one version/language pair. It is read-only once
built; refreshing means building or loading a new instance.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .models import (
    AttachedParticleAttribute,
    ItemAttribute,
    SchemaComponents,
    SchemaContents,
    SchemaItem,
    SchemaOptions,
    SchemaOverview,
)
from .utils import export_file, find_object_by_index, import_file

logger = logging.getLogger("tf2-schema")


class ItemSchema:
    """
    Queryable TF2 item schema.

    Lookups by defindex or effect ID use a binary search over the
    collections as returned by the API (ascending by ID), falling back to a
    linear scan. Lookups by name are case-insensitive linear scans.
    """

    def __init__(self, schema: SchemaComponents, options: SchemaOptions):
        """
        Initialize the schema.

        Args:
            schema: Items, parsed client schema and overview tables
            options: Version and language the schema was fetched with
        """
        self._items = tuple(schema.items)
        self._client = schema.client
        self._overview = schema.overview

        self._version = options.version
        self._language = options.language

    def __repr__(self) -> str:
        return (
            f"ItemSchema(version={self._version!r}, language={self._language!r}, "
            f"items={len(self._items)})"
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def items(self) -> tuple[SchemaItem, ...]:
        return self._items

    @property
    def client_schema(self) -> Any:
        return self._client

    @property
    def overview(self) -> SchemaOverview:
        return self._overview

    @property
    def attributes(self) -> list[ItemAttribute]:
        return self._overview.attributes

    @property
    def particle_effects(self) -> list[AttachedParticleAttribute]:
        return self._overview.attribute_controlled_attached_particles

    @property
    def qualities(self) -> dict[str, int]:
        """Quality name -> quality ID."""
        return self._overview.qualities

    @property
    def quality_names(self) -> dict[str, str]:
        """Quality name -> localized quality name."""
        return self._overview.quality_names

    @property
    def version(self) -> str:
        return self._version

    @property
    def language(self) -> str:
        return self._language

    @property
    def options(self) -> SchemaOptions:
        return SchemaOptions(version=self._version, language=self._language)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_item_by_name(self, name: str, localized: bool = False) -> SchemaItem | None:
        """
        Find an item by its internal or localized name.

        Args:
            name: Name to match, case-insensitively
            localized: Match against ``item_name`` instead of ``name``

        Returns:
            The first matching item, or None
        """
        target = name.lower()
        for item in self._items:
            if (item.item_name if localized else item.name).lower() == target:
                return item
        return None

    def get_item_by_defindex(self, defindex: int) -> SchemaItem | None:
        return find_object_by_index(self._items, defindex, lambda item: item.defindex)

    def get_attribute_by_defindex(self, defindex: int) -> ItemAttribute | None:
        return find_object_by_index(self.attributes, defindex, lambda attribute: attribute.defindex)

    def get_effect_name_by_id(self, effect_id: int) -> str | None:
        """Get the localized name of a particle effect."""
        effect = find_object_by_index(self.particle_effects, effect_id, lambda particle: particle.id)
        return effect.name if effect is not None else None

    def get_effect_id_by_name(self, name: str) -> int | None:
        """Get the ID of a particle effect from its name (case-insensitive)."""
        target = name.lower()
        for effect in self.particle_effects:
            if effect.name.lower() == target:
                return effect.id
        return None

    def get_quality_name_by_id(self, quality_id: int) -> str | None:
        """Get the localized quality name for a quality ID, e.g. 11 -> "Strange"."""
        for name, value in self.qualities.items():
            if value == quality_id:
                return self.quality_names.get(name)
        return None

    def get_quality_id_by_name(self, name: str) -> int | None:
        """Get the quality ID for a localized quality name (case-insensitive)."""
        target = name.lower()
        for key, localized in self.quality_names.items():
            if localized.lower() == target:
                return self.qualities.get(key)
        return None

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_contents(self) -> SchemaContents:
        components = SchemaComponents(items=list(self._items), client=self._client, overview=self._overview)
        return SchemaContents(components=components, options=self.options)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the export document ``{"schema": ..., "options": ...}``."""
        return self.to_contents().model_dump(mode="json", by_alias=True)

    def stringify(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ItemSchema":
        """Create from an export document."""
        contents = SchemaContents.model_validate(data)
        return cls(contents.components, contents.options)

    def export(self, directory: str | Path, filename: str) -> Path:
        """
        Export the schema to a JSON file.

        Args:
            directory: Output directory, created if missing
            filename: File name; ``.json`` is appended if missing

        Returns:
            Path of the written file
        """
        path = export_file(directory, filename, self.stringify())
        logger.info(f"Exported {self!r} to {path}")
        return path

    @classmethod
    def load(cls, path: str | Path) -> "ItemSchema":
        """
        Import a schema from a file written by ``export``.

        Raises:
            FileNotFoundError: If the file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            pydantic.ValidationError: If the document is not an exported schema
        """
        schema = cls.from_dict(import_file(path))
        logger.info(f"Imported {schema!r} from {path}")
        return schema
