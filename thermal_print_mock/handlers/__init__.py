"""
Thermal Print Mock Handlers
===========================

Output backends for printed tickets.
"""

from .base import BaseHandler
from .console import ConsoleHandler

__all__ = ['BaseHandler', 'ConsoleHandler']

# Handler registry
HANDLERS = {
    'console': ConsoleHandler,
}


def get_handler(handler_type: str) -> type:
    """Get handler class by type."""
    return HANDLERS.get(handler_type)
