from .engine import Engine
from .scheduler import LiveScheduler, SessionState

__all__ = ["Engine", "LiveScheduler", "SessionState"]
