"""
Presentation helpers for the browser form.
"""

__all__ = ["page", "render"]
