"""
Analysis workflow: the pipeline and the stateful analyzer session.
"""

__all__ = ["pipeline"]
