"""
Interactive console surface.
"""

from .menu import CommandMenu

__all__ = ['CommandMenu']
