"""Entry point for 'python -m rolegate' command.

This module allows the RoleGate CLI to be invoked using
'python -m rolegate'.
"""

from rolegate.cli import main

if __name__ == "__main__":
    main()
