"""
Utilities Package

Helper modules for MCP server:
- validators.py: Input validation functions
- formatters.py: Response formatting utilities
"""
