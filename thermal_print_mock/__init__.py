"""
Thermal Print Mock
==================

Mock HTTP service simulating a thermal receipt printer controller.
Receipts are written to the console log instead of real hardware.

Usage:
    python -m thermal_print_mock [port]

API Endpoints:
    GET  /status             - Server status
    POST /configure-printer  - Configure printer
    POST /test-printer       - Print test ticket
    POST /print-ticket       - Print ticket
"""

__version__ = '1.0.0'
__author__ = 'Thermal Print Mock Contributors'
