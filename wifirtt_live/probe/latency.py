from __future__ import annotations
import asyncio
from typing import Optional

from ..config import CFG
from ..models import HostLatency, LatencySummary, Technique
from .icmp import measure_icmp
from .tcp import measure_tcp

async def measure_latency(host: str, technique: Technique, sample_count: int,
                          per_sample_timeout: float, cfg: Optional[CFG] = None) -> Optional[LatencySummary]:
    cfg = cfg or CFG()
    technique = Technique(technique)
    if technique is Technique.TCP:
        return await measure_tcp(host, sample_count, per_sample_timeout,
                                 port=cfg.tcp_port, stagger=cfg.tcp_stagger)
    return await measure_icmp(host, sample_count, per_sample_timeout,
                              interval=cfg.icmp_interval, overall_timeout=cfg.ping_timeout)

async def measure_host(host: str, cfg: CFG) -> HostLatency:
    tcp, icmp = await asyncio.gather(
        measure_latency(host, Technique.TCP, cfg.tcp_samples, cfg.probe_timeout, cfg),
        measure_latency(host, Technique.ICMP, cfg.icmp_samples, cfg.probe_timeout, cfg),
    )
    return HostLatency(host=host, tcp=tcp, icmp=icmp)
