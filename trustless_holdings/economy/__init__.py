"""Mini README: Economy session and its change notifications.

``EconomySession`` is what hosts, key bindings and the HTTP API talk to.
``EconomyEvents`` replaces a process-wide singleton: callers that want to
react to balance changes subscribe on the session's hub explicitly.
"""

from .events import EconomyEvent, EconomyEvents
from .session import EconomySession

__all__ = ["EconomyEvent", "EconomyEvents", "EconomySession"]
