"""
Thermal Print Mock Client
=========================

Python SDK for talking to a Thermal Print Mock server (or any service
exposing the same four endpoints).

Usage:
    from thermal_print_mock.client import PrintClient

    client = PrintClient('http://localhost:8080')

    client.configure_printer('EPSON-1', {'paperWidth': 80})
    client.test_printer()
    client.print_ticket(
        'Shop',
        products=[{'quantity': 2, 'description': 'Item', 'price': 5}],
        total=10,
        payment_method='cash',
        cashReceived=15,
        change=5,
    )
"""

import requests
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional


class PrintClient:
    """Client for the Thermal Print Mock service."""

    def __init__(self, base_url: str = 'http://localhost:8080', timeout: int = 30):
        """
        Initialize client.

        Args:
            base_url: Base URL of the print service
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, data: Dict = None) -> Dict[str, Any]:
        """Make API request."""
        url = f'{self.base_url}{endpoint}'

        try:
            if method == 'GET':
                response = requests.get(url, timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, json=data or {}, timeout=self.timeout)
            else:
                raise ValueError(f'Unknown method: {method}')

            return response.json()

        except requests.exceptions.Timeout:
            return {'status': 'error', 'error': 'Request timeout'}
        except requests.exceptions.ConnectionError:
            return {'status': 'error', 'error': f'Cannot connect to {self.base_url}'}
        except (requests.exceptions.RequestException, ValueError) as e:
            return {'status': 'error', 'error': str(e)}

    # =========================================================================
    # Status
    # =========================================================================

    def status(self) -> Dict[str, Any]:
        """Get server status."""
        return self._request('GET', '/status')

    def is_configured(self) -> bool:
        """Check if the server has a printer configured."""
        return self.status().get('printer') == 'Configurada'

    # =========================================================================
    # Printer
    # =========================================================================

    def configure_printer(self, name: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Configure the printer.

        Args:
            name: Printer name
            config: Free-form printer settings
        """
        data = {'printerName': name}
        if config is not None:
            data['config'] = config
        return self._request('POST', '/configure-printer', data)

    def test_printer(self) -> Dict[str, Any]:
        """Print a test ticket."""
        return self._request('POST', '/test-printer')

    # =========================================================================
    # Tickets
    # =========================================================================

    def print_ticket(self, business_name: str, products: List[Dict[str, Any]],
                     total: Any, payment_method: str, **extra) -> Dict[str, Any]:
        """
        Print a ticket.

        Args:
            business_name: Business shown in the header
            products: List of {quantity, description, price}
            total: Ticket total
            payment_method: Payment method label
            **extra: Optional wire fields (customerName, cashReceived, change, timestamp)
        """
        data = {
            'businessName': business_name,
            'products': products,
            'total': total,
            'paymentMethod': payment_method,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            **extra
        }
        return self._request('POST', '/print-ticket', data)
