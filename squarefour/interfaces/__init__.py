"""
squarefour.interfaces - User interfaces for SquareFour

Front ends that drive the engine; currently the console CLI.
"""

# Don't import anything here to avoid circular imports
__all__ = []
