"""
Versioned Store CLI - host tooling for inspecting stores.

Store Commands:
- vstore store path <name> - Print the relative store path
- vstore store show <name> - Load a store and print its value
- vstore store save <name> --json <file> - Save a JSON value into a store
- vstore store delete <name> - Delete a store (with confirmation)

Platform Commands:
- vstore platform-dir - Print the resolved platform directory
"""

from .main import cli

__all__ = ["cli"]
