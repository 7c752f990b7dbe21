"""
Steam Web API client for the TF2 item schema.

Fetches the paginated item list, the schema overview and the raw client
schema (``items_game.txt``), and assembles them into an ``ItemSchema``.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

import httpx
import vdf

from .config import SchemaSettings
from .constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT,
    DEFAULT_VERSION,
    GET_SCHEMA_ITEMS_PATH,
    GET_SCHEMA_OVERVIEW_PATH,
    STEAM_API_BASE_URL,
)
from .errors import SteamError
from .mappers import ItemSchemaMapper
from .models import GetSchemaItemsResult, GetSchemaOverviewResult, SchemaOptions
from .pagination import fetch_schema_items
from .schema import ItemSchema
from .url import UrlBuilder

logger = logging.getLogger("tf2-schema")

ClientSchemaParser = Callable[[str], Any]


class SchemaClient:
    """
    Client for the ``IEconItems_440`` schema endpoints.

    Features:
    - Follows ``GetSchemaItems`` pagination until the last page
    - Fetches items and overview concurrently for ``get_item_schema``
    - Classifies failed responses as ``SteamError``
    - Accepts an existing ``httpx.AsyncClient``; otherwise one is opened per call
    """

    def __init__(
        self,
        api_key: str,
        version: str | None = None,
        language: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_pages: int | None = None,
        parser: ClientSchemaParser | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Steam Web API key
            version: Schema API version, defaults to "v0001"
            language: Language code for localized names, defaults to "en"
            timeout: HTTP timeout in seconds for clients opened by this instance
            max_pages: Optional page limit for ``GetSchemaItems``
            parser: Turns the raw client schema text into a structured object.
                    Defaults to ``vdf.loads``
            http_client: Client to use for all requests. It is not closed by
                         this instance
        """
        self._api_key = api_key
        self._version = version or DEFAULT_VERSION
        self._language = language or DEFAULT_LANGUAGE
        self.timeout = timeout
        self.max_pages = max_pages
        self._parser = parser or vdf.loads
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: SchemaSettings, **kwargs: Any) -> "SchemaClient":
        return cls(
            settings.api_key,
            settings.version,
            settings.language,
            timeout=settings.timeout,
            max_pages=settings.max_pages,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"SchemaClient(version={self._version!r}, language={self._language!r})"

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
    # HTTP Helpers
    # =========================================================================

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the injected HTTP client, or open one owned by this call."""
        if self._http_client is not None:
            yield self._http_client
            return

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    def _builder(self, path: str) -> UrlBuilder:
        return UrlBuilder(
            STEAM_API_BASE_URL,
            path_values=[path, self._version],
            search_params={"key": self._api_key, "language": self._language},
        )

    async def _fetch_overview(self, http: httpx.AsyncClient) -> GetSchemaOverviewResult:
        response = await http.get(str(self._builder(GET_SCHEMA_OVERVIEW_PATH)))
        if not response.is_success:
            raise SteamError.from_response(response)

        overview = GetSchemaOverviewResult.model_validate(response.json().get("result", {}))
        logger.info(
            f"Fetched schema overview: {len(overview.attributes)} attributes, "
            f"{len(overview.attribute_controlled_attached_particles)} particle effects"
        )
        return overview

    async def _fetch_items(self, http: httpx.AsyncClient) -> GetSchemaItemsResult:
        return await fetch_schema_items(http, self._builder(GET_SCHEMA_ITEMS_PATH), self.max_pages)

    async def _fetch_client_schema(self, http: httpx.AsyncClient, url: str) -> Any:
        response = await http.get(url)
        if not response.is_success:
            raise SteamError.from_response(response)

        logger.debug(f"Parsing client schema ({len(response.text)} characters)")
        return self._parser(response.text)

    # =========================================================================
    # Endpoints
    # =========================================================================

    async def get_schema_overview(self) -> GetSchemaOverviewResult:
        """
        Fetch the schema overview (qualities, attributes, particle effects...).

        Raises:
            SteamError: If the request fails
        """
        async with self._session() as http:
            return await self._fetch_overview(http)

    async def get_schema_items(self) -> GetSchemaItemsResult:
        """
        Fetch every item definition, following pagination.

        Raises:
            SteamError: If any page request fails
            PaginationLimitError: If ``max_pages`` is set and reached
        """
        async with self._session() as http:
            return await self._fetch_items(http)

    async def get_client_schema(self, url: str) -> Any:
        """
        Fetch the raw client schema and parse it.

        Args:
            url: Location of ``items_game.txt``, as given by ``items_game_url``

        Returns:
            The parser's output, unmodified

        Raises:
            SteamError: If the request fails
        """
        async with self._session() as http:
            return await self._fetch_client_schema(http, url)

    async def get_item_schema(self) -> ItemSchema:
        """
        Fetch and assemble the complete item schema.

        Items and overview are fetched concurrently over one HTTP client; the
        client schema is fetched afterwards from the ``items_game_url`` they
        report.

        Raises:
            SteamError: If any request fails
        """
        async with self._session() as http:
            tasks = [
                asyncio.ensure_future(self._fetch_items(http)),
                asyncio.ensure_future(self._fetch_overview(http)),
            ]
            try:
                result, overview = await asyncio.gather(*tasks)
            except BaseException:
                # Stop the sibling request and let it unwind before the session closes
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
            client = await self._fetch_client_schema(http, result.items_game_url or overview.items_game_url)

        schema = ItemSchemaMapper.map(client, result.items, overview, self.options)
        logger.info(f"Assembled {schema!r}")
        return schema
