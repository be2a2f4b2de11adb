"""Splitting of an event's URL into its parts."""

from __future__ import annotations

from urllib.parse import urlsplit

from activitysync.models import Event

_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})


def _strip_www(host: str) -> str:
    while host.startswith("www."):
        host = host[len("www."):]
    return host


def split_url_event(event: Event) -> None:
    """Add ``$protocol``, ``$domain``, ``$path`` and ``$params`` from ``data["url"]``.

    The event is changed in place. Nothing is added when there is no string
    ``url`` value or it cannot be parsed as an absolute URL.
    """
    url = event.data.get("url")
    if not isinstance(url, str):
        return
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return
    scheme = parts.scheme
    if not scheme:
        return
    if scheme in _SPECIAL_SCHEMES and scheme != "file" and not hostname:
        return

    domain = hostname or ""
    if ":" in domain:
        domain = f"[{domain}]"
    path = parts.path
    if scheme in _SPECIAL_SCHEMES and not path:
        path = "/"

    event.data["$protocol"] = scheme
    event.data["$domain"] = _strip_www(domain)
    event.data["$path"] = path
    event.data["$params"] = parts.query