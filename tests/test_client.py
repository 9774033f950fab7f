"""PrintClient tests with requests patched out."""

from unittest import mock

import requests

from thermal_print_mock.client import PrintClient


def _response(payload):
    response = mock.Mock()
    response.json.return_value = payload
    return response


@mock.patch('thermal_print_mock.client.requests.get')
def test_status(get):
    get.return_value = _response({'status': 'ok', 'printer': 'Configurada'})
    client = PrintClient('http://printer.local:8080/')

    assert client.is_configured()
    get.assert_called_once_with('http://printer.local:8080/status', timeout=30)


@mock.patch('thermal_print_mock.client.requests.post')
def test_configure_printer(post):
    post.return_value = _response({'status': 'ok'})
    client = PrintClient()

    client.configure_printer('EPSON-1', {'paperWidth': 80})
    post.assert_called_once_with(
        'http://localhost:8080/configure-printer',
        json={'printerName': 'EPSON-1', 'config': {'paperWidth': 80}},
        timeout=30,
    )


@mock.patch('thermal_print_mock.client.requests.post')
def test_print_ticket(post):
    post.return_value = _response({'status': 'ok', 'message': 'Ticket impreso correctamente'})
    client = PrintClient()

    result = client.print_ticket(
        'Shop',
        products=[{'quantity': 2, 'description': 'Item', 'price': 5}],
        total=10,
        payment_method='cash',
        cashReceived=15,
        change=5,
    )

    assert result['status'] == 'ok'
    body = post.call_args.kwargs['json']
    assert body['businessName'] == 'Shop'
    assert body['paymentMethod'] == 'cash'
    assert body['cashReceived'] == 15
    assert 'timestamp' in body


@mock.patch('thermal_print_mock.client.requests.post')
def test_connection_error(post):
    post.side_effect = requests.exceptions.ConnectionError()
    client = PrintClient('http://nowhere:1')

    assert client.test_printer() == {'status': 'error', 'error': 'Cannot connect to http://nowhere:1'}


@mock.patch('thermal_print_mock.client.requests.get')
def test_timeout(get):
    get.side_effect = requests.exceptions.Timeout()
    assert PrintClient().status() == {'status': 'error', 'error': 'Request timeout'}
    assert not PrintClient().is_configured()


@mock.patch('thermal_print_mock.client.requests.get')
def test_other_request_errors(get):
    get.side_effect = requests.exceptions.InvalidURL('Invalid URL')
    assert PrintClient('printer.local').status() == {'status': 'error', 'error': 'Invalid URL'}
