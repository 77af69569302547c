from __future__ import annotations
import asyncio, logging, platform, re
from math import ceil
from typing import Optional

from ..collectors.process import run_command
from ..models import LatencySummary, Technique
from .stats import summarize

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"time[=<](\d+\.?\d*)\s*ms")
# "rtt min/avg/max/mdev = 1.1/2.2/3.3/0.4 ms" (Linux), "round-trip min/avg/max/stddev = ..." (macOS)
SUMMARY_RE = re.compile(r"(\d+\.?\d*)/(\d+\.?\d*)/(\d+\.?\d*)/(\d+\.?\d*)\s*ms")

def parse_ping_times(output: str) -> list[float]:
    times = []
    for line in (output or "").splitlines():
        m = TIME_RE.search(line)
        if m:
            times.append(float(m.group(1)))
    return times

def parse_ping_jitter(output: str) -> Optional[float]:
    m = SUMMARY_RE.search(output or "")
    return float(m.group(4)) if m else None

def build_ping_command(host: str, count: int, interval: float, timeout: float,
                       system: Optional[str] = None) -> list[str]:
    system = system or platform.system()
    if system == "Linux":
        # iputils: -W is seconds
        wait = str(max(1, ceil(timeout)))
    else:
        # macOS/BSD: -W is milliseconds
        wait = str(int(timeout * 1000))
    return ["ping", "-c", str(count), "-i", str(interval), "-W", wait, host]

async def measure_icmp(host: str, samples: int = 10, timeout: float = 2.0,
                       interval: float = 0.1, overall_timeout: float = 15.0) -> Optional[LatencySummary]:
    cmd = build_ping_command(host, samples, interval, timeout)
    try:
        _, out = await run_command(cmd, overall_timeout)
    except asyncio.TimeoutError:
        logger.debug("ping %s exceeded %.1fs", host, overall_timeout)
        return None
    except OSError as e:
        logger.warning("ping unavailable: %s", e)
        return None
    times = parse_ping_times(out)
    logger.debug("icmp %s -> %d/%d samples", host, len(times), samples)
    if not times:
        return None
    return summarize(times, Technique.ICMP, jitter=parse_ping_jitter(out))
