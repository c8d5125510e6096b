"""
代币记录数据结构

注册表中的代币记录和链上 bank metadata 记录都是普通字典，
这里只声明它们的字段形状，供类型检查和文档使用。
"""

from typing import Any, Dict, List, TypedDict

# 无法解析 denom 时使用的占位符号
UNKNOWN_SYMBOL = "UNKNOWN"


class _TokenRecordBase(TypedDict):
    denom: str


class TokenRecord(_TokenRecordBase, total=False):
    """代币记录：denom 必填，其余字段对本层透明"""

    address: str
    symbol: str
    name: str
    decimals: int
    logo: str
    tokenType: str
    coinGeckoId: str


class _BankMetadataBase(TypedDict):
    denom: str


class BankMetadata(_BankMetadataBase, total=False):
    """链上 bank 模块返回的 denom 元数据"""

    name: str
    symbol: str
    description: str
    display: str
    base: str
    uri: str
    decimals: int
    denom_units: List[Dict[str, Any]]


Record = Dict[str, Any]
