"""
Command-line interface for the portscope package.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
