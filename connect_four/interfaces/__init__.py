"""
connect_four.interfaces - User interfaces for Connect Four

This package contains the display sinks the game reports to and the
command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
