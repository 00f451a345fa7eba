# netinfo.py
import ipaddress
import socket
from typing import Iterable, List, Optional

FALLBACK_HOST = "localhost"
# any non-local address works; connect() on UDP only selects the outbound interface
ROUTE_PROBE_ADDRESS = ("10.255.255.255", 1)


def interface_addresses() -> List[str]:
    """IPv4 addresses of this host, in the order the platform reports them."""
    found: List[str] = []
    try:
        found.extend(socket.gethostbyname_ex(socket.gethostname())[2])
    except OSError:
        pass
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(ROUTE_PROBE_ADDRESS)
        found.append(s.getsockname()[0])
    except OSError:
        pass
    finally:
        s.close()
    return list(dict.fromkeys(found))


def pick_lan_address(addresses: Iterable[str]) -> str:
    """First IPv4 address another device on the LAN could reach, else "localhost"."""
    for raw in addresses:
        try:
            addr = ipaddress.ip_address(raw)
        except ValueError:
            continue
        if addr.version != 4:
            continue
        if addr.is_loopback or addr.is_unspecified or addr.is_link_local:
            continue
        return str(addr)
    return FALLBACK_HOST


def lan_address() -> str:
    return pick_lan_address(interface_addresses())


def lan_url(port: int, ip: Optional[str] = None) -> str:
    return f"http://{ip or lan_address()}:{port}"
