"""
CLI Subpackage.

Contains the application entry-points and command handlers for the command-line interface.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Top-level facade for command handlers.
    - ``catalogue``: Rich table rendering of the native alternatives.
    - ``handlers/*``: Implementation modules for specific CLI actions (fix, list, classify).
"""
