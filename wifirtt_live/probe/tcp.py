from __future__ import annotations
import asyncio, logging, time
from typing import Optional

from ..errors import ProbeAttemptFailed
from ..models import LatencySample, LatencySummary, Technique
from .stats import summarize

logger = logging.getLogger(__name__)

async def connect_once(host: str, port: int, timeout: float, delay: float = 0.0) -> LatencySample:
    """One timed TCP handshake. Raises ProbeAttemptFailed on refusal/unreachable/timeout."""
    if delay:
        await asyncio.sleep(delay)
    start = time.perf_counter_ns()
    try:
        _, writer = await asyncio.wait_for(asyncio.open_connection(host, port), timeout)
    except asyncio.TimeoutError as e:
        raise ProbeAttemptFailed(f"{host}:{port} timed out after {timeout}s") from e
    except OSError as e:
        raise ProbeAttemptFailed(f"{host}:{port} {e}") from e
    elapsed_ns = time.perf_counter_ns() - start
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass  # peer reset on close; the sample is already taken
    return LatencySample(Technique.TCP, elapsed_ns / 1e6)

async def measure_tcp(host: str, samples: int = 5, timeout: float = 2.0,
                      port: int = 80, stagger: float = 0.05) -> Optional[LatencySummary]:
    attempts = [connect_once(host, port, timeout, i * stagger) for i in range(samples)]
    settled = await asyncio.gather(*attempts, return_exceptions=True)
    values = []
    for r in settled:
        if isinstance(r, LatencySample):
            values.append(r.ms)
        elif isinstance(r, ProbeAttemptFailed):
            logger.debug("tcp attempt dropped: %s", r)
        else:
            logger.warning("tcp attempt to %s failed unexpectedly: %r", host, r)
    logger.debug("tcp %s:%d -> %d/%d samples", host, port, len(values), samples)
    return summarize(values, Technique.TCP)
