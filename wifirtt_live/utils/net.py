from __future__ import annotations
import ipaddress, re

from ..errors import InvalidHostParameter

IPV4_DOTTED_RE = re.compile(r"^\d{1,3}(\.\d{1,3}){3}$")
BROADCAST_MAC = "ff:ff:ff:ff:ff:ff"

def validate_ipv4(host: str) -> str:
    # the pattern alone lets "300.1.1.1" through; ipaddress catches the octet range
    if not host or not IPV4_DOTTED_RE.match(host):
        raise InvalidHostParameter("Invalid IP address")
    try:
        ipaddress.IPv4Address(host)
    except ValueError as e:
        raise InvalidHostParameter("Invalid IP address") from e
    return host

def is_broadcast_mac(mac: str) -> bool:
    return mac.strip().lower() == BROADCAST_MAC
