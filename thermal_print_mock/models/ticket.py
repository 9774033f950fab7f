"""
Ticket Model
============

A print-ticket request. Exists only for the duration of one request.
"""

from datetime import datetime
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class LineItem:
    """One product line on a ticket."""

    quantity: Any = None
    description: Any = None
    price: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineItem':
        """Create from a product mapping."""
        if not isinstance(data, dict):
            raise TypeError(f'Product must be an object, got {type(data).__name__}')
        return cls(
            quantity=data.get('quantity'),
            description=data.get('description'),
            price=data.get('price'),
        )


@dataclass
class TicketRequest:
    """Receipt contents as sent by the point of sale."""

    business_name: Any = None
    products: List[LineItem] = field(default_factory=list)
    total: Any = None
    payment_method: Any = None
    customer_name: Optional[str] = None
    cash_received: Any = None
    change: Any = None
    timestamp: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TicketRequest':
        """Create from the JSON request body (camelCase keys)."""
        products = data.get('products')
        if not isinstance(products, list):
            raise ValueError('products must be a list')

        return cls(
            business_name=data.get('businessName'),
            products=[LineItem.from_dict(p) for p in products],
            total=data.get('total'),
            payment_method=data.get('paymentMethod'),
            customer_name=data.get('customerName'),
            cash_received=data.get('cashReceived'),
            change=data.get('change'),
            timestamp=data.get('timestamp'),
        )

    @property
    def paid_in_cash(self) -> bool:
        """True when cash was tendered (a zero amount counts as none)."""
        return bool(self.cash_received)

    @property
    def issued_at(self) -> Optional[datetime]:
        """Parsed timestamp in local time, or None if missing or invalid.

        Accepts ISO-8601 strings or epoch milliseconds.
        """
        if isinstance(self.timestamp, (int, float)) and not isinstance(self.timestamp, bool):
            try:
                return datetime.fromtimestamp(self.timestamp / 1000)
            except (OverflowError, OSError, ValueError):
                return None
        if not isinstance(self.timestamp, str) or not self.timestamp:
            return None
        value = self.timestamp
        # fromisoformat() before 3.11 rejects the Z suffix
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed
