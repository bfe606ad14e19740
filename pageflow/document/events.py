#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Events

Synchronous notification of page breaks. Handlers run in registration
order from inside add_page(), before and after the new page exists.
"""

from enum import Enum
from typing import Callable, Dict, List

from config.logging_config import get_logger

logger = get_logger(__name__)

Handler = Callable[[], None]


class PageEvent(Enum):
    """Events emitted by PDFDocument.add_page()"""
    BEFORE_PAGE_BREAK = "before_page_break"
    AFTER_PAGE_BREAK = "after_page_break"


class Subscription:
    """Handle returned by PageEvents.subscribe(); dispose() unregisters."""

    def __init__(self, events: 'PageEvents', event: PageEvent, handler: Handler):
        self._events = events
        self.event = event
        self.handler = handler
        self.active = True

    def dispose(self):
        if not self.active:
            return
        self._events._remove(self.event, self.handler)
        self.active = False

    def __repr__(self):
        state = "active" if self.active else "disposed"
        return f"<Subscription {self.event.value} {state}>"


class PageEvents:
    """Registry of page break handlers"""

    def __init__(self):
        self._handlers: Dict[PageEvent, List[Handler]] = {event: [] for event in PageEvent}

    def subscribe(self, event: PageEvent, handler: Handler) -> Subscription:
        self._handlers[event].append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__qualname__', handler)} to {event.value}")
        return Subscription(self, event, handler)

    def emit(self, event: PageEvent):
        # Copy so a handler may dispose its own subscription while running
        for handler in list(self._handlers[event]):
            handler()

    def count(self, event: PageEvent) -> int:
        return len(self._handlers[event])

    def _remove(self, event: PageEvent, handler: Handler):
        handlers = self._handlers[event]
        if handler in handlers:
            handlers.remove(handler)
