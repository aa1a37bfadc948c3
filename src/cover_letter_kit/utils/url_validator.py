"""Job posting URL normalization and SSRF screening.

Postings are fetched on the user's behalf, so a URL is only accepted when
every address it can reach is public. Loopback, private, link-local,
reserved and cloud-metadata targets are refused before any request is made.
"""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Iterator
from urllib.parse import urlparse

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class SSRFError(ValueError):
    """The URL points at an internal or otherwise non-public address."""


INTERNAL_HOSTNAMES = frozenset({"localhost", "localhost.localdomain"})
METADATA_ADDRESSES = frozenset(
    {
        ipaddress.ip_address("169.254.169.254"),
        ipaddress.ip_address("0.0.0.0"),
    }
)


def normalize_url(raw: str) -> str:
    """Trim a pasted URL and default it to https when no scheme is given."""
    url = raw.strip()
    if not url:
        raise ValueError("Missing or invalid URL")
    if "://" not in url:
        url = f"https://{url}"
    return url


def is_public_address(addr: IPAddress) -> bool:
    return not (
        addr in METADATA_ADDRESSES
        or addr.is_private
        or addr.is_loopback
        or addr.is_reserved
        or addr.is_link_local
    )


def _as_ip(hostname: str) -> IPAddress | None:
    try:
        return ipaddress.ip_address(hostname)
    except ValueError:
        return None


def _resolve(hostname: str) -> Iterator[IPAddress]:
    try:
        infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise ValueError(f"Cannot resolve hostname {hostname!r}: {exc}") from exc
    for info in infos:
        yield ipaddress.ip_address(info[4][0])


def validate_url(url: str) -> str:
    """Return ``url`` unchanged if it is safe to fetch.

    Raises SSRFError for internal targets and ValueError for malformed or
    unresolvable URLs.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Unsupported URL scheme: {parsed.scheme!r}")
    if not parsed.hostname:
        raise ValueError(f"Invalid URL format: {url!r}")

    host = parsed.hostname.lower()
    if host in INTERNAL_HOSTNAMES:
        raise SSRFError(f"Blocked internal hostname: {host!r}")

    literal = _as_ip(host)
    if literal is not None:
        if not is_public_address(literal):
            raise SSRFError(f"Blocked private/internal IP: {literal}")
        return url

    blocked = next((a for a in _resolve(host) if not is_public_address(a)), None)
    if blocked is not None:
        raise SSRFError(f"Hostname {host!r} resolves to blocked address: {blocked}")
    return url
