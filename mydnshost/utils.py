"""
URL helpers for the MyDNSHost API client.

The API server is written against PHP's ``http_build_query``/``parse_url``
conventions, so query strings are built the same way: booleans become
``1``/``0``, ``None`` values are dropped and nested values use
``key[sub]`` notation.
"""

from typing import Optional, Dict, Any, List, Tuple, Mapping
from urllib.parse import urlsplit, urlencode, parse_qsl


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(data: Any, prefix: Optional[str] = None) -> List[Tuple[str, str]]:
    """Flatten nested mappings and sequences into ``key[sub]`` pairs."""
    if isinstance(data, Mapping):
        items = data.items()
    elif isinstance(data, (list, tuple)):
        items = enumerate(data)
    else:
        return [(prefix or "", _scalar(data))]

    pairs: List[Tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if isinstance(value, (Mapping, list, tuple)):
            pairs.extend(_flatten(value, name))
        else:
            pairs.append((name, _scalar(value)))
    return pairs


def build_query(data: Mapping[str, Any]) -> str:
    """
    Encode query data the way PHP's ``http_build_query`` does.

    Args:
        data: Query parameters; values may be nested mappings or lists

    Returns:
        URL-encoded query string (without a leading ``?``)
    """
    return urlencode(_flatten(data))


def _root_key(name: str) -> str:
    return name.split("[", 1)[0]


def merge_query(query: Optional[str], data: Mapping[str, Any]) -> str:
    """
    Merge query data into an existing query string.

    Existing parameters are kept unless the same top-level key is supplied in
    ``data``. A replaced key keeps its original position; new keys are
    appended.

    Args:
        query: Existing query string (may be empty or None)
        data: Parameters to add

    Returns:
        Combined URL-encoded query string
    """
    if not query:
        return build_query(data)

    pending = {str(key): _flatten({key: value}) for key, value in data.items()}
    replaced = set(pending)

    merged: List[Tuple[str, str]] = []
    for name, value in parse_qsl(query, keep_blank_values=True):
        root = _root_key(name)
        if root not in replaced:
            merged.append((name, value))
        elif root in pending:
            merged.extend(pending.pop(root))

    for pairs in pending.values():
        merged.extend(pairs)
    return urlencode(merged)


def parse_url(url: str) -> Dict[str, Any]:
    """
    Split a URL into its components.

    Only components present in the URL are included. Keys are ``scheme``,
    ``host``, ``port``, ``user``, ``pass``, ``path``, ``query`` and
    ``fragment``. Host case is preserved.
    """
    split = urlsplit(url)
    parts: Dict[str, Any] = {}

    if split.scheme:
        parts["scheme"] = split.scheme

    netloc = split.netloc
    if netloc:
        userinfo, at, hostport = netloc.rpartition("@")
        if at:
            user, colon, password = userinfo.partition(":")
            parts["user"] = user
            if colon:
                parts["pass"] = password

        if hostport.startswith("["):
            host, _, rest = hostport.partition("]")
            host += "]"
            port = rest[1:] if rest.startswith(":") else ""
        else:
            host, _, port = hostport.partition(":")

        if host:
            parts["host"] = host
        if port:
            parts["port"] = int(port) if port.isdigit() else port

    if split.path:
        parts["path"] = split.path
    if split.query:
        parts["query"] = split.query
    if split.fragment:
        parts["fragment"] = split.fragment

    return parts


def unparse_url(parts: Mapping[str, Any]) -> str:
    """
    Rebuild a URL from the components returned by ``parse_url``.

    Missing components are left out along with their delimiters.
    """
    scheme = f"{parts['scheme']}://" if "scheme" in parts else ""
    host = parts.get("host", "")
    port = f":{parts['port']}" if "port" in parts else ""
    user = parts.get("user", "")
    password = f":{parts['pass']}" if "pass" in parts else ""
    auth = f"{user}{password}@" if (user or password) else ""
    path = parts.get("path", "")
    query = f"?{parts['query']}" if parts.get("query") else ""
    fragment = f"#{parts['fragment']}" if parts.get("fragment") else ""
    return f"{scheme}{auth}{host}{port}{path}{query}{fragment}"


def add_query(url: str, data: Mapping[str, Any]) -> str:
    """Merge ``data`` into the query string of ``url``."""
    parts = parse_url(url)
    parts["query"] = merge_query(parts.get("query"), data)
    return unparse_url(parts)


def redact_url(url: str) -> str:
    """Return ``url`` without any ``user:pass@`` userinfo."""
    parts = parse_url(url)
    parts.pop("user", None)
    parts.pop("pass", None)
    return unparse_url(parts)
