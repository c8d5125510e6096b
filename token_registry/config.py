"""
注册表配置模块

独立管理数据根目录、REST 超时等配置参数，支持通过 .env / 环境变量覆盖。
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .models import UNKNOWN_SYMBOL
from .networks import Network

DEFAULT_REST_TIMEOUT_MS = 2000

# 包目录的上一级即项目根目录 (token_registry -> project_root)
DEFAULT_ROOT_DIR = Path(__file__).resolve().parent.parent


@dataclass
class RegistryConfig:
    """注册表配置"""

    root_dir: Path = DEFAULT_ROOT_DIR
    data_dir: str = "data"
    rest_timeout_ms: int = DEFAULT_REST_TIMEOUT_MS
    unknown_symbol: str = UNKNOWN_SYMBOL
    log_file: Optional[str] = None

    def __post_init__(self):
        self.root_dir = Path(self.root_dir)

    def data_path(self, network: Union[Network, str]) -> Path:
        """某个网络的数据目录，如 <root>/data/mainnet"""
        from .classification.token_type import get_network_file_name

        return self.root_dir / self.data_dir / get_network_file_name(network)


def load_config(env_file: Optional[str] = None) -> RegistryConfig:
    """
    从环境变量加载配置

    支持的变量：
        TOKEN_REGISTRY_ROOT: 数据根目录
        TOKEN_REGISTRY_DATA_DIR: 根目录下的数据子目录
        TOKEN_REGISTRY_REST_TIMEOUT_MS: REST 请求超时（毫秒）
        TOKEN_REGISTRY_LOG_FILE: 日志文件路径

    Args:
        env_file: .env 文件路径，默认按 python-dotenv 规则查找

    Returns:
        RegistryConfig 对象

    Raises:
        ValueError: 超时配置不是正整数
    """
    load_dotenv(env_file)

    timeout_raw = os.getenv("TOKEN_REGISTRY_REST_TIMEOUT_MS")
    if timeout_raw is None or timeout_raw.strip() == "":
        rest_timeout_ms = DEFAULT_REST_TIMEOUT_MS
    else:
        try:
            rest_timeout_ms = int(timeout_raw)
        except ValueError:
            raise ValueError(
                f"TOKEN_REGISTRY_REST_TIMEOUT_MS 必须是整数，当前值: {timeout_raw}"
            )
        if rest_timeout_ms <= 0:
            raise ValueError(
                f"TOKEN_REGISTRY_REST_TIMEOUT_MS 必须大于 0，当前值: {timeout_raw}"
            )

    return RegistryConfig(
        root_dir=Path(os.getenv("TOKEN_REGISTRY_ROOT") or DEFAULT_ROOT_DIR),
        data_dir=os.getenv("TOKEN_REGISTRY_DATA_DIR") or "data",
        rest_timeout_ms=rest_timeout_ms,
        log_file=os.getenv("TOKEN_REGISTRY_LOG_FILE") or None,
    )
