"""Ticket rendering tests."""

import logging
from datetime import datetime

import pytest

from thermal_print_mock.handlers import ConsoleHandler, get_handler
from thermal_print_mock.handlers.console import (
    format_value, render_test_page, render_ticket,
)
from thermal_print_mock.models import PrinterConfiguration, TicketRequest


@pytest.mark.parametrize('value, expected', [
    (5, '5'),
    (5.0, '5'),
    (5.5, '5.5'),
    ('12.30', '12.30'),
    (None, '-'),
    (True, 'true'),
])
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_render_test_page():
    lines = render_test_page('EPSON-1', now=datetime(2024, 3, 5, 14, 7, 9))
    assert lines == [
        '🧪 TICKET DE PRUEBA',
        '==================',
        'Servidor de Impresión HTTP',
        'Impresora: EPSON-1',
        'Fecha: 05/03/2024, 14:07:09',
        'Estado: ✅ Operativo',
        '==================',
    ]


def test_render_ticket_with_cash():
    ticket = TicketRequest.from_dict({
        'businessName': 'Shop',
        'customerName': 'Ana',
        'products': [
            {'quantity': 2, 'description': 'Item', 'price': 5},
            {'quantity': 1, 'description': 'Coffee', 'price': 2.5},
        ],
        'total': 12.5,
        'paymentMethod': 'cash',
        'cashReceived': 20,
        'timestamp': '2024-01-01T10:30:00',
    })

    assert render_ticket(ticket) == [
        '🎫 IMPRIMIENDO TICKET',
        '=====================',
        'Negocio: Shop',
        'Cliente: Ana',
        'Fecha: 01/01/2024, 10:30:00',
        '---------------------',
        '1. 2x Item - $5',
        '2. 1x Coffee - $2.5',
        '---------------------',
        'TOTAL: $12.5',
        'Método de pago: cash',
        'Efectivo recibido: $20',
        'Vuelto: $0',
        '=====================',
    ]


def test_render_ticket_zero_cash_is_not_cash():
    ticket = TicketRequest.from_dict({
        'businessName': 'Shop',
        'products': [],
        'total': 0,
        'paymentMethod': 'card',
        'cashReceived': 0,
    })
    lines = render_ticket(ticket)
    assert 'Fecha: Fecha inválida' in lines
    assert not any(line.startswith('Efectivo') for line in lines)
    assert lines[-4:] == [
        '---------------------',
        'TOTAL: $0',
        'Método de pago: card',
        '=====================',
    ]


def test_render_ticket_missing_product_fields():
    ticket = TicketRequest.from_dict({'products': [{'description': 'Loose'}]})
    assert '1. -x Loose - $-' in render_ticket(ticket)


def test_console_handler_logs_lines(caplog):
    caplog.set_level(logging.INFO, logger='thermal_print_mock.console')
    handler = ConsoleHandler(PrinterConfiguration(name='EPSON-1'))

    lines = handler.print_test_page()

    assert caplog.messages == lines
    assert all(r.name == 'thermal_print_mock.console' for r in caplog.records)


def test_get_handler():
    assert get_handler('console') is ConsoleHandler
    assert get_handler('escpos') is None


def test_render_ticket_epoch_timestamp():
    ticket = TicketRequest.from_dict({'products': [], 'timestamp': 1704067200000})
    expected = datetime.fromtimestamp(1704067200).strftime('%d/%m/%Y, %H:%M:%S')
    assert f'Fecha: {expected}' in render_ticket(ticket)
