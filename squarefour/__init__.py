"""
squarefour - Two-player grid-drop game on a configurable square board

This package provides the board engine (gravity drops, win detection in all
four directions) and a console interface for playing it.
"""

# Version number
__version__ = '0.1.0'
