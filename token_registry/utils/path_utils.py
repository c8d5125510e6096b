"""
路径解析工具模块

提供注册表数据文件的路径解析功能，避免重复代码。
"""

from pathlib import Path
from typing import Union


def resolve_data_path(relative_path: Union[str, Path], root_dir: Path) -> Path:
    """
    解析数据路径（相对于数据根目录）

    只接受根目录内的相对路径，绝对路径或通过 ".." 跳出根目录的路径会被拒绝。

    Args:
        relative_path: 相对路径字符串（如 "data/mainnet/tokens.json"）
        root_dir: 数据根目录

    Returns:
        解析后的绝对路径

    Raises:
        ValueError: 路径不在根目录内
    """
    path = Path(relative_path)
    if path.is_absolute():
        raise ValueError(f"只接受相对根目录的路径: {relative_path}")

    root = Path(root_dir).resolve()
    resolved = (root / path).resolve()

    if resolved != root and root not in resolved.parents:
        raise ValueError(f"路径超出根目录 {root}: {relative_path}")

    return resolved


def ensure_directory(path: Path) -> Path:
    """
    确保目录存在，如果不存在则创建

    Args:
        path: 目录路径

    Returns:
        目录路径
    """
    path.mkdir(parents=True, exist_ok=True)
    return path
