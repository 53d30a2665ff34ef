"""Renderers fed by universe chunk refreshes."""

from .text import TextRenderer

__all__ = ['TextRenderer']
