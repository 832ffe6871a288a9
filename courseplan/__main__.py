"""
Package entry point.

Allows running the application via:

    python -m courseplan

This simply forwards execution to courseplan.cli.main().
"""

from courseplan.cli import main

if __name__ == "__main__":
    main()
