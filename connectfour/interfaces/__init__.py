"""
connectfour.interfaces - User interfaces for Connect Four

Currently only the command-line interface lives here.
"""

# Don't import anything here to avoid circular imports
__all__ = []
