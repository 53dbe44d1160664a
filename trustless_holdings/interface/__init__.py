"""Mini README: HTTP interface to the economy.

Exports the FastAPI application factory that lets other scripts and tools
read balances and move money without sharing a process-wide singleton.
"""

from .web_app import create_application

__all__ = ["create_application"]
