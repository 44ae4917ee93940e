"""
Event system for the cardtable engine.

`Observable` is the full-state push used by presentation layers; the
`EventEmitter` carries typed table events for bookkeeping such as session
statistics.
"""

from cardtable.events.emitter import EventEmitter, EventPriority, TableEventType
from cardtable.events.observable import Observable

__all__ = ["EventEmitter", "EventPriority", "TableEventType", "Observable"]
