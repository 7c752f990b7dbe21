"""
Paginated fetching of the ``GetSchemaItems`` endpoint.

The endpoint returns the item list in pages. Each page carries a ``next``
defindex while more items remain; the following request passes it back as
the ``start`` query parameter.
"""

from __future__ import annotations

import logging

import httpx

from .constants import START_PARAMETER
from .errors import SteamError
from .models import GetSchemaItemsResult, SchemaItem
from .url import UrlBuilder
from .utils import is_empty

logger = logging.getLogger("tf2-schema")


class PaginationLimitError(RuntimeError):
    """Raised when a configured page limit is reached before the last page."""

    def __init__(self, max_pages: int, next_start: int):
        super().__init__(
            f"Stopped after {max_pages} pages; the server still returned next={next_start}"
        )
        self.max_pages = max_pages
        self.next_start = next_start


async def fetch_page(http: httpx.AsyncClient, builder: UrlBuilder) -> GetSchemaItemsResult:
    """
    Fetch and decode a single page.

    Raises:
        SteamError: If the response status is not a success
    """
    response = await http.get(str(builder))
    if not response.is_success:
        raise SteamError.from_response(response)

    payload = response.json()
    return GetSchemaItemsResult.model_validate(payload.get("result", {}))


async def fetch_schema_items(
    http: httpx.AsyncClient,
    builder: UrlBuilder,
    max_pages: int | None = None,
) -> GetSchemaItemsResult:
    """
    Fetch every page of the item list and merge them in page order.

    Pages are requested one after another; each request waits for the
    previous page's cursor. The loop ends when a page omits ``next``.

    Args:
        http: Client used for the requests
        builder: URL of the first page; its ``start`` parameter is
                 overwritten with each cursor
        max_pages: Optional upper bound on the number of requests.
                   None follows the cursor until the server stops sending one

    Returns:
        The last page's result with ``items`` holding all pages' items

    Raises:
        SteamError: If any page request fails
        PaginationLimitError: If ``max_pages`` is reached while a cursor remains
    """
    items: list[SchemaItem] = []
    pages = 0

    while True:
        page = await fetch_page(http, builder)
        pages += 1

        if not is_empty(page.items):
            items.extend(page.items)

        if page.next is None:
            break

        if max_pages is not None and pages >= max_pages:
            raise PaginationLimitError(max_pages, page.next)

        logger.debug(f"Fetching next page starting at defindex {page.next}")
        builder.set_param(START_PARAMETER, str(page.next))

    logger.info(f"Fetched {len(items)} schema items in {pages} page(s)")
    return page.model_copy(update={"items": items, "next": None})
