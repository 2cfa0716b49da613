"""
Terminal rendering for TermSnake.
"""

from .terminal import TerminalRenderer

__all__ = ['TerminalRenderer']
