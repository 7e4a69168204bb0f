from .store import Store
from .visitor_event import VisitorEvent

__all__ = ["Store", "VisitorEvent"]
