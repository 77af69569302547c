from .snapshot import build_snapshot

__all__ = ["build_snapshot"]
