"""Work out which hostname and IP this host should announce."""

import ipaddress
import logging
import socket

import psutil

from .config import Settings
from .errors import HostLookupError, IPEnumerationError, NoUsableAddressError
from .models import AnnounceTarget

logger = logging.getLogger(__name__)

# Only this exact rendering is skipped. ::1/128 and the rest of 127/8 are not.
LOOPBACK_ADDRESS = "127.0.0.1/8"


def resolve_hostname(override: str) -> str:
    """Return ``override`` if set, otherwise the OS hostname."""
    if override:
        return override
    try:
        return socket.gethostname()
    except OSError as e:
        raise HostLookupError(f"hostname lookup failed: {e}") from e


def _prefix_length(family: int, netmask: str | None) -> int:
    width = 32 if family == socket.AF_INET else 128
    if not netmask:
        return width
    packed = ipaddress.ip_address(netmask).packed
    return sum(bin(byte).count("1") for byte in packed)


def interface_addresses() -> list[str]:
    """
    List every IPv4/IPv6 interface address as ``address/prefixlen``.

    Entries come back in the order psutil reports them, e.g.
    ``["127.0.0.1/8", "10.0.0.5/24", "::1/128", "fe80::1/64"]``.
    """
    addresses = []
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            host = addr.address.split("%", 1)[0]
            addresses.append(f"{host}/{_prefix_length(addr.family, addr.netmask)}")
    return addresses


def resolve_ip(override: str) -> str:
    """
    Return ``override`` if set, otherwise the first non-loopback local address.

    The override is not validated. Auto-detection picks the first address
    whose CIDR form is not ``127.0.0.1/8``, in whatever order the OS lists
    interfaces, and strips the prefix.
    """
    if override:
        return override
    try:
        addresses = interface_addresses()
    except (OSError, ValueError) as e:
        raise IPEnumerationError(f"listing interface addresses failed: {e}") from e

    for address in addresses:
        if address != LOOPBACK_ADDRESS:
            return address.split("/", 1)[0]
    raise NoUsableAddressError(
        f"no usable address among {len(addresses)} interface address(es)"
    )


def resolve_target(settings: Settings) -> AnnounceTarget:
    """Resolve hostname and IP for ``settings`` and bundle them with the registry URL."""
    hostname = resolve_hostname(settings.hostname)
    if not settings.hostname:
        logger.info(f"no hostname given, using {hostname}")

    ip = resolve_ip(settings.ip)
    if not settings.ip:
        logger.info(f"no ip given, using {ip}")

    return AnnounceTarget(hostname=hostname, ip=ip, registry_address=settings.etcd)
