import pytest

from thermal_print_mock.app import create_app
from thermal_print_mock.state import PrinterState


@pytest.fixture
def state():
    return PrinterState()


@pytest.fixture
def app(state):
    app = create_app(state=state)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def configured_client(client):
    response = client.post('/configure-printer', json={'printerName': 'X'})
    assert response.status_code == 200
    return client


@pytest.fixture
def sample_ticket():
    return {
        'businessName': 'Shop',
        'products': [{'quantity': 2, 'description': 'Item', 'price': 5}],
        'total': 10,
        'paymentMethod': 'cash',
        'cashReceived': 15,
        'change': 5,
        'timestamp': '2024-01-01T00:00:00Z',
    }
