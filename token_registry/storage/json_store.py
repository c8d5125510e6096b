"""
JSON 文件存储

在固定根目录下读写注册表 JSON 快照。所有操作都不会向调用方抛出异常：
读取失败返回回退值，写入失败只记录日志。

路径一律相对根目录解析，不能访问根目录以外的文件。
同一路径的并发写入不做协调，最后写入者生效。
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..utils.path_utils import ensure_directory, resolve_data_path

# read_json_file 未传 fallback 时的标记，显式传入的 None 会原样返回
_MISSING = object()


class JsonFileStore:
    """以根目录为基准的 JSON 文件读写"""

    def __init__(
        self, root_dir: Union[str, Path], logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            root_dir: 相对路径的解析基准目录
            logger: 日志输出，默认为模块 logger
        """
        self.root_dir = Path(root_dir)
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None):
        """根据 RegistryConfig 构造，以其 root_dir 为基准"""
        return cls(config.root_dir, logger=logger)

    def resolve(self, path: Union[str, Path]) -> Path:
        """
        相对路径解析为根目录下的绝对路径

        Raises:
            ValueError: 绝对路径或跳出根目录的路径
        """
        return resolve_data_path(path, self.root_dir)

    def path_exists(self, path: Union[str, Path]) -> bool:
        try:
            return self.resolve(path).exists()
        except ValueError as e:
            self.logger.warning(f"⚠️ {e}")
            return False

    def read_json_file(self, path: Union[str, Path], fallback: Any = _MISSING) -> Any:
        """
        读取 JSON 文件

        Args:
            path: 相对根目录的路径，如 "data/mainnet/tokens.json"
            fallback: 文件不存在或解析失败时的返回值，默认为空列表

        Returns:
            解析后的 JSON 数据或 fallback
        """
        if fallback is _MISSING:
            fallback = []

        try:
            file_path = self.resolve(path)
        except ValueError as e:
            self.logger.error(f"❌ 读取 JSON 文件失败: {e}")
            return fallback

        if not file_path.exists():
            self.logger.info(f"read_json_file: {file_path} 不存在")
            return fallback

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except Exception as e:
            self.logger.error(f"❌ 读取 JSON 文件失败 ({path}): {e}")
            return fallback

    def write_json_file(self, path: Union[str, Path], data: Any) -> bool:
        """
        写入 JSON 文件（2 空格缩进，覆盖已有内容）

        父目录不存在时自动创建；创建失败只记录日志，仍尝试写入。

        Args:
            path: 相对根目录的路径
            data: 可 JSON 序列化的数据

        Returns:
            bool: 写入是否成功
        """
        try:
            file_path = self.resolve(path)
        except ValueError as e:
            self.logger.error(f"❌ 更新 JSON 文件失败: {e}")
            return False

        if not file_path.parent.exists():
            try:
                ensure_directory(file_path.parent)
            except Exception as e:
                self.logger.error(f"❌ 创建目录失败 ({file_path.parent}): {e}")

        try:
            content = json.dumps(data, indent=2, ensure_ascii=False)
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(content)
            return True
        except Exception as e:
            self.logger.error(f"❌ 更新 JSON 文件失败 ({path}): {e}")
            return False
