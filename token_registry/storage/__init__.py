"""
本地 JSON 快照存储
"""

from .json_store import JsonFileStore

__all__ = ["JsonFileStore"]
