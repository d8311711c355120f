"""
Configuration helpers for the reply analyzer.
"""

from reply_auto.config.settings import AppConfig, load_config, load_environment

__all__ = ["AppConfig", "load_config", "load_environment"]
