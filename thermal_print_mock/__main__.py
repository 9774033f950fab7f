"""Allow running as ``python -m thermal_print_mock``."""

from .app import main

if __name__ == '__main__':
    main()
