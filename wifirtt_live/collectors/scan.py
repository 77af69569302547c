from __future__ import annotations
import asyncio, json, logging

from ..config import CFG
from ..errors import ScanUnavailable
from ..models import ScanResult
from .process import run_command

logger = logging.getLogger(__name__)

def parse_scan_output(out: str) -> ScanResult:
    try:
        data = json.loads(out)
    except ValueError as e:
        raise ScanUnavailable("Invalid scanner output") from e
    return ScanResult.from_dict(data)

async def fetch_scan(cfg: CFG) -> ScanResult:
    try:
        rc, out = await run_command([cfg.scanner_path], cfg.scan_timeout)
    except asyncio.TimeoutError as e:
        raise ScanUnavailable(f"Scanner failed: timed out after {cfg.scan_timeout:g}s") from e
    except OSError as e:
        raise ScanUnavailable(f"Scanner failed: {e}") from e
    if rc != 0:
        # the scanner reports its own failures as {"error": "..."} before exiting 1
        try:
            msg = json.loads(out).get("error")
        except (ValueError, AttributeError):
            msg = None
        raise ScanUnavailable(f"Scanner failed: {msg or f'exit status {rc}'}")
    scan = parse_scan_output(out)
    logger.debug("scan: %d networks (%d raw), gateway=%s",
                 len(scan.networks), scan.total_raw_networks, scan.gateway_ip)
    return scan
