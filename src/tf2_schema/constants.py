"""
Constants for the Steam Web API item schema endpoints.
"""

from enum import IntEnum


# API Configuration
STEAM_API_BASE_URL = "https://api.steampowered.com/IEconItems_440/"
GET_SCHEMA_ITEMS_PATH = "GetSchemaItems"
GET_SCHEMA_OVERVIEW_PATH = "GetSchemaOverview"
START_PARAMETER = "start"

DEFAULT_VERSION = "v0001"
DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT = 30.0

# Export files
JSON_EXTENSION = "json"
EXTENSION_SEPARATOR = "."
PATH_SEPARATOR = "/"


class HttpStatus(IntEnum):
    """HTTP status codes returned by the Steam Web API."""
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    REQUEST_TIMEOUT = 408
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    GATEWAY_TIMEOUT = 504
