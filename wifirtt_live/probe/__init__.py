from .latency import measure_host, measure_latency
from .stats import summarize

__all__ = ["measure_host", "measure_latency", "summarize"]
