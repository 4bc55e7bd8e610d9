"""
Domains API - Domain, record, key and hook operations.
"""

from typing import Optional, Dict, Any, List, Union

from ._http import HTTPClient, extract, extract_listing

Result = Union[Dict[str, Any], List[Any]]


class DomainsAPI:
    """
    API for domain operations.

    Handles:
    - Domain CRUD, access and statistics
    - Zone import/export and backend sync
    - Record CRUD
    - Domain keys and hooks

    When domain-admin override is enabled on the HTTP client, every path is
    routed through ``/admin/domains`` instead of ``/domains``.
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Domains API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def _path(self, *parts: Any) -> str:
        """Build a domain path, honouring domain-admin override."""
        prefix = "/admin/domains" if self._http.domain_admin else "/domains"
        return prefix + "".join(f"/{part}" for part in parts)

    # ========== Domains ==========

    def list(self, query_params: Optional[Dict[str, Any]] = None) -> Any:
        """
        List our domains.

        Args:
            query_params: Optional query parameters for filtering

        Returns:
            Domains keyed by name, or an empty list
        """
        if not self._http.has_auth:
            return []

        return extract(self._http.api(self._path(), "GET", query_params), default=[])

    def create(self, domain: str, owner: Optional[str] = None) -> Result:
        """
        Create a domain.

        Args:
            domain: Domain name
            owner: Owner to assign (defaults to ourselves)
        """
        if not self._http.has_auth:
            return []

        data = {"domain": domain}
        if owner is not None:
            data["owner"] = owner
        return self._http.api(self._path(), "POST", data)

    def delete(self, domain: str) -> Result:
        """Delete a domain."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain), "DELETE")

    def get(self, domain: str) -> Any:
        """Get domain data, or None if the domain could not be read."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api(self._path(domain)))

    def update(self, domain: str, data: Dict[str, Any]) -> Result:
        """Update domain data."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain), "POST", data)

    def get_access(self, domain: str) -> Any:
        """Get the access list for a domain."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api(self._path(domain, "access")), default=[])

    def set_access(self, domain: str, data: Dict[str, Any]) -> Result:
        """Update the access list for a domain."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "access"), "POST", data)

    def get_stats(self, domain: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """
        Get query statistics for a domain.

        Args:
            domain: Domain name
            options: Query options passed to the statistics endpoint
        """
        if not self._http.has_auth:
            return []

        result = self._http.api(self._path(domain, "stats"), "GET", options)
        return extract(result, "stats", default=[])

    def get_logs(self, domain: str, options: Optional[Dict[str, Any]] = None) -> Any:
        """Get change logs for a domain."""
        if not self._http.has_auth:
            return []

        result = self._http.api(self._path(domain, "logs"), "GET", options)
        return extract(result, default=[])

    def sync(self, domain: str) -> Result:
        """Ask the server to resync the domain to the DNS backends."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "sync"))

    def export_zone(self, domain: str) -> Any:
        """Export a domain as a BIND zone file."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api(self._path(domain, "export")), "zone", default=[])

    def import_zone(self, domain: str, zone: str) -> Result:
        """
        Import a domain from a BIND zone file.

        Args:
            domain: Domain name
            zone: Zone file contents
        """
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "import"), "POST", {"zone": zone})

    # ========== Records ==========

    def get_records(self, domain: str) -> Any:
        """Get all records for a domain."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api(self._path(domain, "records")), default=[])

    def get_record(self, domain: str, record_id: Union[int, str]) -> Any:
        """Get a single record by ID."""
        if not self._http.has_auth:
            return []

        return extract(self._http.api(self._path(domain, "records", record_id)), default=[])

    def _name_path(self, domain: str, name: str, record_type: Optional[str]) -> str:
        if record_type:
            return self._path(domain, "record", name, record_type)
        return self._path(domain, "record", name)

    def get_records_by_name(
        self,
        domain: str,
        name: str,
        record_type: Optional[str] = None
    ) -> Any:
        """
        Get records for a domain matching a name.

        Args:
            domain: Domain name
            name: Record name (relative to the domain)
            record_type: Optional record type to limit to
        """
        if not self._http.has_auth:
            return []

        result = self._http.api(self._name_path(domain, name, record_type))
        return extract(result, "records", default=[])

    def set_records(self, domain: str, data: Dict[str, Any]) -> Result:
        """
        Add, update or delete records in bulk.

        Args:
            domain: Domain name
            data: Change set, e.g. ``{"records": [{"name": "www", ...}]}``
        """
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "records"), "POST", data)

    def set_record(self, domain: str, record_id: Union[int, str], data: Dict[str, Any]) -> Result:
        """Update a single record by ID."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "records", record_id), "POST", data)

    def delete_records(self, domain: str) -> Any:
        """Delete all records for a domain."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "records"), "DELETE").get("response")

    def delete_record(self, domain: str, record_id: Union[int, str]) -> Any:
        """Delete a single record by ID."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "records", record_id), "DELETE").get("response")

    def delete_records_by_name(
        self,
        domain: str,
        name: str,
        record_type: Optional[str] = None
    ) -> Any:
        """Delete records matching a name, optionally limited to one type."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._name_path(domain, name, record_type), "DELETE").get("response")

    # ========== Domain Keys ==========

    def get_keys(self, domain: str) -> Optional[Any]:
        """Get domain keys."""
        if not self._http.has_auth:
            return None

        return extract_listing(self._http.api(self._path(domain, "keys")))

    def create_key(self, domain: str, data: Dict[str, Any]) -> Result:
        """Create a domain key."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "keys"), "POST", data)

    def update_key(self, domain: str, key: str, data: Dict[str, Any]) -> Result:
        """Update a domain key."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "keys", key), "POST", data)

    def delete_key(self, domain: str, key: str) -> Result:
        """Delete a domain key."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "keys", key), "DELETE")

    # ========== Domain Hooks ==========

    def get_hooks(self, domain: str) -> Optional[Any]:
        """Get domain hooks."""
        if not self._http.has_auth:
            return None

        return extract_listing(self._http.api(self._path(domain, "hooks")))

    def create_hook(self, domain: str, data: Dict[str, Any]) -> Result:
        """Create a domain hook."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "hooks"), "POST", data)

    def update_hook(self, domain: str, hook_id: Union[int, str], data: Dict[str, Any]) -> Result:
        """Update a domain hook."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "hooks", hook_id), "POST", data)

    def delete_hook(self, domain: str, hook_id: Union[int, str]) -> Result:
        """Delete a domain hook."""
        if not self._http.has_auth:
            return []

        return self._http.api(self._path(domain, "hooks", hook_id), "DELETE")
