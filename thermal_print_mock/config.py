"""
Thermal Print Mock Configuration
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

PORT = int(os.environ.get('THERMAL_PRINT_PORT', 8080))
HOST = os.environ.get('THERMAL_PRINT_HOST', '0.0.0.0')
DEBUG = os.environ.get('THERMAL_PRINT_DEBUG', 'false').lower() == 'true'

LOG_LEVEL = os.environ.get('THERMAL_PRINT_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(message)s'

# =============================================================================
# Printer Output
# =============================================================================

# Output backend for tickets (see handlers.HANDLERS)
PRINTER_HANDLER = os.environ.get('THERMAL_PRINT_HANDLER', 'console')

DATE_FORMAT = '%d/%m/%Y, %H:%M:%S'

# =============================================================================
# Response Messages
# =============================================================================

MSG_SERVER_ACTIVE = 'Servidor de impresión activo'
MSG_CONFIGURED = 'Configurada'
MSG_NOT_CONFIGURED = 'No configurada'
MSG_TEST_SENT = 'Ticket de prueba enviado a impresora'
MSG_TICKET_PRINTED = 'Ticket impreso correctamente'

ERR_NAME_REQUIRED = 'Nombre de impresora requerido'
ERR_NOT_CONFIGURED = 'Impresora no configurada'
ERR_INTERNAL = 'Error interno del servidor'
ERR_TEST_PRINT = 'Error al imprimir ticket de prueba'
ERR_PRINT_TICKET = 'Error al imprimir ticket'
ERR_NOT_FOUND = 'Endpoint no encontrado'
