"""
工具模块

提供路径解析、日志配置等实用工具
"""

from .log_utils import setup_logger
from .path_utils import ensure_directory, resolve_data_path

__all__ = [
    "setup_logger",
    "ensure_directory",
    "resolve_data_path",
]
