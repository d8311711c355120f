"""
OpenAI chat-completion client and classifier payload validation.
"""

__all__ = ["client", "schemas"]
