"""
UI package initialization
"""

from .gui import LightsOutGUI

__all__ = ['LightsOutGUI']
