"""
Local matching rules: substring matching and the reply decision.
"""

__all__ = ["keyword_matcher", "rules"]
