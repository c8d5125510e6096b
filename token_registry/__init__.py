"""
代币注册表辅助工具

主要模块:
- classification: denom 代币标准分类、网络文件名
- builders: denom / 地址查找表的去重与合并
- api: 链上 REST 客户端与 IBC denom trace 解析
- storage: 本地 JSON 快照读写
- utils: 路径、日志工具
"""

__version__ = "1.0.0"

from .api.denom_trace import DenomTrace, DenomTraceResolver, get_denom_trace
from .builders.denom_maps import (
    bank_metadata_to_cw20_denom_map,
    bank_metadata_to_denom_map,
    denoms_to_denom_map,
    token_to_address_map,
    tokens_to_address_map,
    tokens_to_denom_map,
)
from .classification.token_type import (
    TokenType,
    get_network_file_name,
    get_token_type,
)
from .config import RegistryConfig, load_config
from .networks import Network
from .storage.json_store import JsonFileStore

__all__ = [
    "DenomTrace",
    "DenomTraceResolver",
    "get_denom_trace",
    "bank_metadata_to_cw20_denom_map",
    "bank_metadata_to_denom_map",
    "denoms_to_denom_map",
    "token_to_address_map",
    "tokens_to_address_map",
    "tokens_to_denom_map",
    "TokenType",
    "get_network_file_name",
    "get_token_type",
    "RegistryConfig",
    "load_config",
    "Network",
    "JsonFileStore",
]
