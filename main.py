#!/usr/bin/env python
"""
Thermal Print Mock - Standalone Entry Point

Run directly:
    python main.py [port]

Or with environment variables:
    THERMAL_PRINT_PORT=9000 python main.py
"""

import os
import sys

# Ensure package is importable when running directly
if __name__ == '__main__':
    # Add this directory to path for standalone execution
    package_dir = os.path.dirname(os.path.abspath(__file__))
    if package_dir not in sys.path:
        sys.path.insert(0, package_dir)

from thermal_print_mock.app import main


if __name__ == '__main__':
    main()
