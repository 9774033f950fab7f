"""
Base Handler
============

Abstract base class for ticket output handlers.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import PrinterConfiguration, TicketRequest


class BaseHandler(ABC):
    """Abstract base class for ticket output handlers."""

    def __init__(self, printer: PrinterConfiguration):
        """Initialize handler with printer configuration."""
        self.printer = printer

    @abstractmethod
    def print_test_page(self) -> List[str]:
        """
        Print the self-test diagnostic ticket.

        Returns:
            The printed lines
        """
        pass

    @abstractmethod
    def print_ticket(self, ticket: TicketRequest) -> List[str]:
        """
        Print a receipt.

        Args:
            ticket: Parsed ticket request

        Returns:
            The printed lines
        """
        pass
