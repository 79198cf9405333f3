"""
Bouncing Waves - two oscillators drawn as an ASCII height field.
"""

__version__ = "0.1.0"
