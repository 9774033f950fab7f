"""
Thermal Print Mock - Main Application
=====================================

HTTP service simulating a thermal printer. Tickets are written to the
console log.

Run: python -m thermal_print_mock [port]
"""

import sys
import json
import signal
import logging
import argparse
from datetime import datetime, timezone
from typing import Optional

from flask import Blueprint, Flask, current_app, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException

from . import __version__
from .config import (
    PORT, HOST, DEBUG, LOG_LEVEL, LOG_FORMAT, PRINTER_HANDLER,
    MSG_SERVER_ACTIVE, MSG_CONFIGURED, MSG_NOT_CONFIGURED, MSG_TEST_SENT,
    MSG_TICKET_PRINTED, ERR_NAME_REQUIRED, ERR_INTERNAL, ERR_TEST_PRINT,
    ERR_PRINT_TICKET, ERR_NOT_FOUND,
)
from .errors import PrintServiceError, ValidationError, InternalError
from .handlers import get_handler
from .models import PrinterConfiguration, TicketRequest
from .state import PrinterState

logger = logging.getLogger(__name__)

printer_bp = Blueprint('printer', __name__)

# =============================================================================
# Helpers
# =============================================================================


def _now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
    return now.replace('+00:00', 'Z')


def _state() -> PrinterState:
    return current_app.extensions['printer_state']


def _json_body() -> dict:
    """Request body as a dict; a missing or non-JSON body counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _get_printer_handler(printer: PrinterConfiguration):
    handler_type = current_app.config['PRINTER_HANDLER']
    handler_class = get_handler(handler_type)
    if not handler_class:
        raise LookupError(f'Unknown printer handler: {handler_type}')
    return handler_class(printer)


@printer_bp.before_app_request
def log_request():
    """Log every incoming request."""
    logger.info('%s - %s %s', _now_iso(), request.method, request.path)


@printer_bp.before_app_request
def parse_json_body():
    """Reject malformed JSON bodies before routing."""
    if request.is_json and request.get_data(cache=True):
        try:
            request.get_json()
        except BadRequest as e:
            logger.error('Error del servidor: %s', e.description)
            raise InternalError(ERR_INTERNAL) from e


# =============================================================================
# Endpoints
# =============================================================================

@printer_bp.route('/status', methods=['GET'])
def status():
    """Server status and whether a printer is configured."""
    return jsonify({
        'status': 'ok',
        'message': MSG_SERVER_ACTIVE,
        'timestamp': _now_iso(),
        'printer': MSG_CONFIGURED if _state().is_configured else MSG_NOT_CONFIGURED,
    })


@printer_bp.route('/configure-printer', methods=['POST'])
def configure_printer():
    """Set (or replace) the printer configuration."""
    data = _json_body()
    printer_name = data.get('printerName')
    if not printer_name or not isinstance(printer_name, str):
        raise ValidationError(ERR_NAME_REQUIRED)

    try:
        settings = data.get('config')
        printer = _state().configure(printer_name, settings)

        logger.info('✅ Impresora configurada: %s', printer_name)
        if 'config' in data:
            logger.info('Configuración: %s', json.dumps(settings, indent=2, ensure_ascii=False))
        else:
            logger.info('Configuración: undefined')
        logger.debug('Printer configuration: %s', printer.to_dict())
    except Exception as e:
        logger.exception('Error configurando impresora: %s', e)
        raise InternalError(ERR_INTERNAL) from e

    return jsonify({
        'status': 'ok',
        'message': f"Impresora '{printer_name}' configurada correctamente",
    })


@printer_bp.route('/test-printer', methods=['POST'])
def test_printer():
    """Print the diagnostic test ticket."""
    printer = _state().require()

    try:
        _get_printer_handler(printer).print_test_page()
    except Exception as e:
        logger.exception('Error en prueba de impresora: %s', e)
        raise InternalError(ERR_TEST_PRINT) from e

    return jsonify({'status': 'ok', 'message': MSG_TEST_SENT})


@printer_bp.route('/print-ticket', methods=['POST'])
def print_ticket():
    """Print a customer receipt."""
    printer = _state().require()

    try:
        ticket = TicketRequest.from_dict(_json_body())
        _get_printer_handler(printer).print_ticket(ticket)
        logger.debug('Ticket sent to %s (%d products)', printer.name, len(ticket.products))
    except Exception as e:
        logger.exception('Error imprimiendo ticket: %s', e)
        raise InternalError(ERR_PRINT_TICKET) from e

    return jsonify({'status': 'ok', 'message': MSG_TICKET_PRINTED})


# =============================================================================
# Error Handlers
# =============================================================================

def _error_response(message: str, status_code: int):
    return jsonify({'status': 'error', 'error': message}), status_code


def handle_service_error(error: PrintServiceError):
    return jsonify(error.to_dict()), error.status_code


def handle_not_found(error):
    """Unknown path, or a known path with the wrong method."""
    return _error_response(ERR_NOT_FOUND, 404)


def handle_http_error(error: HTTPException):
    return _error_response(error.description, error.code)


def handle_unexpected_error(error: Exception):
    """Last resort: log the error, never leak it."""
    logger.exception('Error del servidor: %s', error)
    return _error_response(ERR_INTERNAL, 500)


# =============================================================================
# Application Setup
# =============================================================================

def create_app(state: Optional[PrinterState] = None,
               printer_handler: str = PRINTER_HANDLER) -> Flask:
    """
    Build the Flask application.

    Args:
        state: Printer state to serve (a fresh, unconfigured one by default)
        printer_handler: Output backend name (see handlers.HANDLERS)
    """
    app = Flask(__name__)
    app.config['PRINTER_HANDLER'] = printer_handler
    app.json.ensure_ascii = False
    app.extensions['printer_state'] = state if state is not None else PrinterState()

    CORS(app)
    app.register_blueprint(printer_bp)

    app.register_error_handler(PrintServiceError, handle_service_error)
    app.register_error_handler(404, handle_not_found)
    app.register_error_handler(405, handle_not_found)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)

    return app


# =============================================================================
# Main
# =============================================================================

def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments (environment supplies the defaults)."""
    parser = argparse.ArgumentParser(
        prog='thermal-print-mock',
        description='Servidor HTTP de prueba para impresora térmica',
    )
    parser.add_argument(
        'port',
        nargs='?',
        type=int,
        default=PORT,
        help=f'Server port (default: {PORT})',
    )
    parser.add_argument(
        '-H', '--host',
        default=HOST,
        metavar='ADDR',
        help=f'Server bind address (default: {HOST})',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=DEBUG,
        help='Enable Flask debug mode',
    )
    return parser.parse_args(argv)


def _shutdown(signum, frame):
    print('\n🛑 Cerrando servidor de impresión...')
    sys.exit(0)


def print_banner(port: int):
    """Startup banner."""
    print('🖥️  SERVIDOR HTTP DE IMPRESIÓN TÉRMICA')
    print('=' * 37)
    print(f'🌐 Servidor ejecutándose en: http://localhost:{port}')
    print(f'🔗 Acceso desde red local: http://0.0.0.0:{port}')
    print(f'📦 Versión: {__version__}')
    print('📋 Endpoints disponibles:')
    print('   GET  /status           - Estado del servidor')
    print('   POST /configure-printer - Configurar impresora')
    print('   POST /test-printer     - Prueba de impresión')
    print('   POST /print-ticket     - Imprimir ticket')
    print('=' * 37)
    print('✅ Listo para recibir comandos de impresión')
    print('')


def main(argv=None):
    """Run the service."""
    args = parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    app = create_app()
    print_banner(args.port)

    app.run(host=args.host, port=args.port, debug=args.debug, use_reloader=False)


if __name__ == '__main__':
    main()
