"""
Browser surface: the Flask app and the page it serves.
"""

from .app import create_app

__all__ = [
    'create_app',
]
