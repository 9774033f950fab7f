"""
Thermal Print Mock Models
"""

from .printer import PrinterConfiguration
from .ticket import LineItem, TicketRequest

__all__ = ['PrinterConfiguration', 'LineItem', 'TicketRequest']
