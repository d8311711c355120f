"""
Reply analyzer: decide whether a piece of text deserves a reply.

This package combines locally configured keyword / blocked-term rules with
an LLM classification of the text.
"""

__all__ = ["config", "llm", "matcher", "settings", "web", "workflow"]
