"""
Printer Configuration Model
===========================

The configuration of the (single) simulated printer.
"""

from datetime import datetime
from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class PrinterConfiguration:
    """Printer name and free-form settings."""

    name: str
    settings: Dict[str, Any] = field(default_factory=dict)
    configured_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'config': self.settings,
            'configuredAt': self.configured_at.isoformat(),
        }
