"""
URL building for Steam Web API requests.
"""

from urllib.parse import urljoin

import httpx

from .constants import PATH_SEPARATOR


class UrlBuilder:
    """
    Builds a request URL from a base URL, path segments and query parameters.

    Query parameters stay mutable after construction so that a paginated
    request can overwrite its cursor between pages.
    """

    def __init__(
        self,
        base_url: str,
        path_values: str | list[str] | None = None,
        search_params: dict[str, str] | None = None,
    ):
        self.url = urljoin(base_url, self._to_path(path_values))
        self.search_params: dict[str, str] = dict(search_params or {})

    @staticmethod
    def _to_path(path_values: str | list[str] | None) -> str:
        if not path_values:
            return PATH_SEPARATOR
        if isinstance(path_values, list):
            return PATH_SEPARATOR.join(path_values)
        return path_values

    def set_param(self, name: str, value: str) -> None:
        """Set a query parameter, replacing any previous value."""
        self.search_params[name] = value

    def get_param(self, name: str) -> str | None:
        return self.search_params.get(name)

    def __str__(self) -> str:
        if not self.search_params:
            return self.url
        return str(httpx.URL(self.url, params=self.search_params))

    def __repr__(self) -> str:
        # The query carries the API key, so only the path is shown.
        return f"UrlBuilder({self.url!r})"
