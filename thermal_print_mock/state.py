"""
Printer State
=============

Holds the current printer configuration for one application instance.
"""

import threading
from typing import Optional, Dict, Any

from .errors import NotConfiguredError
from .models import PrinterConfiguration


class PrinterState:
    """Single configuration slot; the last completed write wins."""

    def __init__(self):
        self._lock = threading.Lock()
        self._current: Optional[PrinterConfiguration] = None

    @property
    def is_configured(self) -> bool:
        return self._current is not None

    def configure(self, name: str, settings: Optional[Dict[str, Any]] = None) -> PrinterConfiguration:
        """Replace the configuration."""
        printer = PrinterConfiguration(name=name, settings=settings or {})
        with self._lock:
            self._current = printer
        return printer

    def require(self) -> PrinterConfiguration:
        """Return the configuration or raise NotConfiguredError."""
        printer = self._current
        if printer is None:
            raise NotConfiguredError()
        return printer
