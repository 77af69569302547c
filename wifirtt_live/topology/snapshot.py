from __future__ import annotations
import asyncio, logging

from ..collectors import fetch_address_table, fetch_scan
from ..config import CFG
from ..models import TopologySnapshot
from ..probe import measure_host

logger = logging.getLogger(__name__)

async def build_snapshot(cfg: CFG) -> TopologySnapshot:
    """One measurement cycle: scan + arp in parallel, then gateway latency.

    Only a failed scan aborts (ScanUnavailable); the arp table degrades to []
    and missing latency summaries stay None.
    """
    arp_task = asyncio.ensure_future(fetch_address_table(cfg))
    try:
        scan = await fetch_scan(cfg)
        gateway = None
        if scan.gateway_ip:
            gateway = await measure_host(scan.gateway_ip, cfg)
        table = await arp_task
    except BaseException:
        arp_task.cancel()
        # arp child is reaped before the failure propagates
        await asyncio.gather(arp_task, return_exceptions=True)
        raise

    snap = TopologySnapshot(scan=scan, address_table=tuple(table), gateway_latency=gateway)
    logger.debug("snapshot: %d networks, %d arp entries, gateway=%s",
                 len(scan.networks), len(table), scan.gateway_ip)
    return snap
