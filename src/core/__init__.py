"""
AvatarAPI - Core Module
=======================
"""

from src.core.config import config, LOGS_DIR, ROOT_DIR
from src.core.logger import log

__all__ = ["config", "log", "LOGS_DIR", "ROOT_DIR"]
