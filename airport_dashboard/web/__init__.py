"""
FastAPI adapter serving the dashboard state to a browser client.
"""

from .app import create_app, main

__all__ = ['create_app', 'main']
