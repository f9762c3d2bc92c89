"""Allow `python -m tripletex_mcp`."""

from .server import main

main()
