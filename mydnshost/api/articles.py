"""
Articles API - News articles shown to users.
"""

from typing import Dict, Any, List, Union

from ._http import HTTPClient, extract


class ArticlesAPI:
    """
    API for articles.

    Published articles are public; managing them requires admin access.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self) -> Any:
        """Get currently published articles."""
        return extract(self._http.api("/articles"), default=[])

    def list_all(self) -> Any:
        """Get all articles, including unpublished ones (admin only)."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api("/admin/articles"), default=[])

    def create(self, data: Dict[str, Any]) -> Union[Dict[str, Any], List[Any]]:
        """Create a new article (admin only)."""
        if not self._http.has_auth:
            return []

        return self._http.api("/admin/articles", "POST", data)

    def get(self, article_id: Union[int, str]) -> Any:
        """Get a specific article (admin only)."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api(f"/admin/articles/{article_id}"), default=[])

    def update(self, article_id: Union[int, str], data: Dict[str, Any]) -> Union[Dict[str, Any], List[Any]]:
        """Update a specific article (admin only)."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/admin/articles/{article_id}", "POST", data)

    def delete(self, article_id: Union[int, str]) -> Union[Dict[str, Any], List[Any]]:
        """Delete a specific article (admin only)."""
        if not self._http.has_auth:
            return []

        return self._http.api(f"/admin/articles/{article_id}", "DELETE")
