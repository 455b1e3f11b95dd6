"""Registration of this host with a SkyDNS tree stored in etcd."""

import json
import logging
from urllib.parse import quote

import httpx

from .errors import AnnounceFailedError, TransportError
from .models import AnnounceTarget

logger = logging.getLogger(__name__)

SKYDNS_PATH = "/skydns/local/skydns/"


def record_url(registry_address: str, hostname: str) -> str:
    """URL of the skydns key for ``hostname``, with the hostname as one path segment."""
    return f"{registry_address}{SKYDNS_PATH}{quote(hostname, safe='')}"


def record_body(ip: str) -> bytes:
    """Encode the skydns record, e.g. ``{"host":"10.0.0.5"}``."""
    return json.dumps({"host": ip}, separators=(",", ":")).encode("utf-8")


def _put(client: httpx.Client, url: str, body: bytes) -> httpx.Response:
    try:
        return client.put(url, content=body, follow_redirects=True)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise TransportError(f"PUT {url} failed: {e}") from e


def announce(
    ip: str,
    hostname: str,
    registry_address: str,
    client: httpx.Client | None = None,
) -> None:
    """
    Register ``ip`` under ``hostname`` in the skydns tree at ``registry_address``.

    PUT {registry_address}/skydns/local/skydns/{hostname} with:
    {"host": {ip}}

    One request is made, with no timeout and no retry; redirects are followed
    and the body re-sent. Anything but a final 200 OK raises AnnounceFailedError.
    Connection-level failures and unusable URLs raise TransportError.
    """
    url = record_url(registry_address, hostname)
    body = record_body(ip)
    logger.debug(f"PUT {url} {body.decode('utf-8')}")

    if client is None:
        with httpx.Client(timeout=None) as own_client:
            response = _put(own_client, url, body)
    else:
        response = _put(client, url, body)

    if response.status_code != httpx.codes.OK:
        raise AnnounceFailedError(response.status_code)
    logger.info(f"Announced {hostname} -> {ip}")


def announce_target(target: AnnounceTarget, client: httpx.Client | None = None) -> None:
    """Announce a resolved AnnounceTarget."""
    announce(target.ip, target.hostname, target.registry_address, client=client)
