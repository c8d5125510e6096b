"""
代币分类模块

核心组件：
- get_token_type: 根据 denom 前缀判断代币标准
- get_network_file_name: 网络环境到数据文件名后缀的映射
- classify_denoms / get_token_type_summary: 批量分类与统计
"""

from .summary import classify_denoms, export_token_types_csv, get_token_type_summary
from .token_type import (
    TokenType,
    get_network_file_name,
    get_token_type,
    is_cw20_contract_address,
)

__all__ = [
    "TokenType",
    "get_token_type",
    "get_network_file_name",
    "is_cw20_contract_address",
    "classify_denoms",
    "get_token_type_summary",
    "export_token_types_csv",
]
