from __future__ import annotations
import asyncio, logging, re

from ..config import CFG
from ..models import AddressEntry
from ..utils.net import is_broadcast_mac
from .process import run_command

logger = logging.getLogger(__name__)

ARP_RE = re.compile(r"\((?P<ip>\d+\.\d+\.\d+\.\d+)\)\s+at\s+(?P<mac>[0-9a-f:]+)", re.IGNORECASE)

def parse_address_table(text: str) -> list[AddressEntry]:
    entries: list[AddressEntry] = []
    for line in (text or "").splitlines():
        m = ARP_RE.search(line)
        if not m or is_broadcast_mac(m.group("mac")):
            continue
        entries.append(AddressEntry(ip=m.group("ip"), mac=m.group("mac")))
    return entries

async def fetch_address_table(cfg: CFG) -> list[AddressEntry]:
    try:
        rc, out = await run_command(["arp", "-a"], cfg.arp_timeout)
    except (OSError, asyncio.TimeoutError) as e:
        logger.warning("arp table unavailable: %r", e)
        return []
    if rc != 0:
        logger.warning("arp -a exited with status %d", rc)
        return []
    return parse_address_table(out)
