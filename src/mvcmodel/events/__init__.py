"""Publish/subscribe primitives used by models and option stores."""

from mvcmodel.events.handler import EventHandler, EventTarget, Listener
from mvcmodel.events.listeners import ListenerList

__all__ = [
    "EventHandler",
    "EventTarget",
    "Listener",
    "ListenerList",
]
