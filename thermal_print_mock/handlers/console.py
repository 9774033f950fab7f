"""
Console Handler
===============

Simulated printer: tickets are rendered as text and written to the
console log instead of a device.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from .base import BaseHandler
from ..config import DATE_FORMAT
from ..models import TicketRequest

logger = logging.getLogger('thermal_print_mock.console')

TEST_RULE = '=' * 18
TICKET_RULE = '=' * 21
TICKET_SEPARATOR = '-' * 21


def format_value(value: Any) -> str:
    """Format a ticket value; integral floats print without decimals."""
    if value is None:
        return '-'
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_date(value: Optional[datetime]) -> str:
    if value is None:
        return 'Fecha inválida'
    return value.strftime(DATE_FORMAT)


def render_test_page(printer_name: str, now: Optional[datetime] = None) -> List[str]:
    """Lines of the self-test ticket."""
    now = now or datetime.now()
    return [
        '🧪 TICKET DE PRUEBA',
        TEST_RULE,
        'Servidor de Impresión HTTP',
        f'Impresora: {printer_name}',
        f'Fecha: {format_date(now)}',
        'Estado: ✅ Operativo',
        TEST_RULE,
    ]


def render_ticket(ticket: TicketRequest) -> List[str]:
    """Lines of a customer receipt."""
    lines = [
        '🎫 IMPRIMIENDO TICKET',
        TICKET_RULE,
        f'Negocio: {format_value(ticket.business_name)}',
        f'Cliente: {ticket.customer_name or "Sin nombre"}',
        f'Fecha: {format_date(ticket.issued_at)}',
        TICKET_SEPARATOR,
    ]

    for index, item in enumerate(ticket.products, start=1):
        lines.append(
            f'{index}. {format_value(item.quantity)}x '
            f'{format_value(item.description)} - ${format_value(item.price)}'
        )

    lines.append(TICKET_SEPARATOR)
    lines.append(f'TOTAL: ${format_value(ticket.total)}')
    lines.append(f'Método de pago: {format_value(ticket.payment_method)}')

    if ticket.paid_in_cash:
        lines.append(f'Efectivo recibido: ${format_value(ticket.cash_received)}')
        lines.append(f'Vuelto: ${format_value(ticket.change or 0)}')

    lines.append(TICKET_RULE)
    return lines


class ConsoleHandler(BaseHandler):
    """Writes tickets to the console log."""

    def _emit(self, lines: List[str]) -> List[str]:
        for line in lines:
            logger.info(line)
        return lines

    def print_test_page(self) -> List[str]:
        return self._emit(render_test_page(self.printer.name))

    def print_ticket(self, ticket: TicketRequest) -> List[str]:
        return self._emit(render_ticket(ticket))
