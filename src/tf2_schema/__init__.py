"""
tf2-schema - fetch, query and store the Team Fortress 2 item schema.

Components:
- SchemaClient: Fetches items (paginated), overview and client schema from
  the Steam Web API and assembles them
- ItemSchema: Queries by name, defindex, attribute, particle effect and quality;
  exports to and imports from JSON
- SchemaManager: Keeps several clients and schemas by identifier
- SteamError: Classified failure of a Steam Web API request

Usage:
    from tf2_schema import SchemaClient, ItemSchema

    client = SchemaClient(api_key)
    schema = await client.get_item_schema()
    schema.get_item_by_name("Team Captain", localized=True)
    schema.export("./static", "schema")

    offline = ItemSchema.load("./static/schema.json")
"""

from .client import SchemaClient
from .config import SchemaSettings
from .errors import ErrorCause, SteamError, SteamErrorKind, classify_status
from .manager import SchemaManager, SchemaManagerError, SchemaManagerOptions
from .mappers import ItemSchemaMapper, SchemaOverviewMapper
from .models import (
    AttachedParticleAttribute,
    GetSchemaItemsResult,
    GetSchemaOverviewResult,
    ItemAttribute,
    SchemaComponents,
    SchemaContents,
    SchemaItem,
    SchemaOptions,
    SchemaOverview,
)
from .pagination import PaginationLimitError, fetch_schema_items
from .schema import ItemSchema
from .url import UrlBuilder

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("tf2-schema")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    # Client
    "SchemaClient",
    "SchemaSettings",
    "fetch_schema_items",
    "PaginationLimitError",
    "UrlBuilder",
    # Schema
    "ItemSchema",
    "ItemSchemaMapper",
    "SchemaOverviewMapper",
    # Manager
    "SchemaManager",
    "SchemaManagerError",
    "SchemaManagerOptions",
    # Errors
    "SteamError",
    "SteamErrorKind",
    "ErrorCause",
    "classify_status",
    # Models
    "AttachedParticleAttribute",
    "GetSchemaItemsResult",
    "GetSchemaOverviewResult",
    "ItemAttribute",
    "SchemaComponents",
    "SchemaContents",
    "SchemaItem",
    "SchemaOptions",
    "SchemaOverview",
]
