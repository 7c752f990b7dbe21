"""
Data models for the TF2 item schema.

These models mirror the payloads of the Steam Web API ``IEconItems_440``
interface. Item and attribute definitions keep any field the API adds so
that an exported schema can be imported without loss.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Item Definitions
# =============================================================================

class ItemCapabilities(BaseModel):
    """Capability flags of an item definition."""
    model_config = ConfigDict(extra="allow")

    nameable: bool = False
    can_consume: bool = False
    can_strangify: bool = False
    strange_parts: bool = False
    can_gift_wrap: bool = False
    can_craft_mark: bool = False
    can_be_restored: bool = False
    can_card_upgrade: bool = False
    can_killstreakify: bool = False


class ItemAttributeValue(BaseModel):
    """An attribute attached to an item definition."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = ""
    attribute_class: str = Field(default="", alias="class")
    value: int | float = 0


class SchemaItem(BaseModel):
    """A single item definition from ``GetSchemaItems``."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(description="Internal item name")
    defindex: int = Field(ge=0, description="Unique definition index")
    item_name: str = Field(default="", description="Localized display name")
    item_class: str = ""
    item_type_name: str = ""
    item_description: str | None = None
    proper_name: bool = False
    item_slot: str | None = None
    model_player: str | None = None
    item_quality: int = 0
    image_inventory: str | None = None
    min_ilevel: int = 0
    max_ilevel: int = 0
    image_url: str | None = None
    image_url_large: str | None = None
    drop_type: str | None = None
    craft_class: str | None = None
    craft_material_type: str | None = None
    capabilities: ItemCapabilities | None = None
    attributes: list[ItemAttributeValue] = Field(default_factory=list)


# =============================================================================
# Overview Tables
# =============================================================================

class ItemAttribute(BaseModel):
    """An attribute definition from ``GetSchemaOverview``."""
    model_config = ConfigDict(extra="allow")

    defindex: int = Field(description="Unique attribute index")
    name: str = Field(description="Name describing the attribute")
    attribute_class: str = ""
    description_string: str | None = None
    description_format: str | None = None
    effect_type: str = ""
    hidden: bool = False
    stored_as_integer: bool = False


class AttachedParticleAttribute(BaseModel):
    """A particle effect (unusual effect) definition."""
    id: int = Field(description="Effect ID referenced by the attached particle attribute")
    name: str = Field(description="Localized effect name")
    system: str = ""
    attach_to_rootbone: bool = False


class ItemSetAttribute(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    attribute_class: str = Field(default="", alias="class")
    value: int | float = 0


class ItemSet(BaseModel):
    """An item set and the bonus granted by equipping all of it."""
    item_set: str = ""
    name: str = ""
    store_bundle: str | None = None
    items: list[str] = Field(default_factory=list)
    attributes: list[ItemSetAttribute] = Field(default_factory=list)


class ItemLevel(BaseModel):
    level: int = 0
    required_score: int = 0
    name: str = ""


class ItemLevels(BaseModel):
    """Rank names for a kill eater rank set."""
    name: str = ""
    levels: list[ItemLevel] = Field(default_factory=list)


class ItemOriginName(BaseModel):
    origin: int = 0
    name: str = ""


class StringLookup(BaseModel):
    index: int = 0
    string: str = ""


class StringLookups(BaseModel):
    table_name: str = ""
    strings: list[StringLookup] = Field(default_factory=list)


class KillEaterScoreType(BaseModel):
    type: int = 0
    type_name: str = ""
    level_data: str | None = None


class SchemaOverview(BaseModel):
    """Reference tables that accompany the item list.

    Only the listed tables are kept; anything else in the API result is
    dropped. Tables missing from the response default to empty.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    qualities: dict[str, int] = Field(default_factory=dict, description="Quality name -> quality ID")
    quality_names: dict[str, str] = Field(
        default_factory=dict,
        alias="qualityNames",
        description="Quality name -> localized quality name",
    )
    attributes: list[ItemAttribute] = Field(default_factory=list)
    attribute_controlled_attached_particles: list[AttachedParticleAttribute] = Field(default_factory=list)
    item_sets: list[ItemSet] = Field(default_factory=list)
    item_levels: list[ItemLevels] = Field(default_factory=list)
    origin_names: list[ItemOriginName] = Field(default_factory=list, alias="originNames")
    string_lookups: list[StringLookups] = Field(default_factory=list)
    kill_eater_score_types: list[KillEaterScoreType] = Field(default_factory=list)


# =============================================================================
# API Results
# =============================================================================

class GetSchemaItemsResult(BaseModel):
    """One page (or the merged pages) of ``GetSchemaItems``."""
    status: int = 0
    items_game_url: str = ""
    items: list[SchemaItem] = Field(default_factory=list)
    next: int | None = Field(default=None, description="Defindex the next page starts at")


class GetSchemaOverviewResult(SchemaOverview):
    """The ``GetSchemaOverview`` result, including the request status."""
    status: int = 0
    items_game_url: str = ""


# =============================================================================
# Assembled Schema
# =============================================================================

class SchemaOptions(BaseModel):
    """Version and language a schema was fetched with."""
    version: str
    language: str


class SchemaComponents(BaseModel):
    """The three assembled parts of an item schema."""
    items: list[SchemaItem] = Field(default_factory=list)
    client: Any = Field(default=None, description="Parsed client schema (opaque)")
    overview: SchemaOverview = Field(default_factory=SchemaOverview)


class SchemaContents(BaseModel):
    """The exported document: ``{"schema": ..., "options": ...}``."""
    model_config = ConfigDict(populate_by_name=True)

    components: SchemaComponents = Field(alias="schema")
    options: SchemaOptions
