"""
映射构建模块

将代币记录、bank metadata 折叠为按 denom / 地址去重的查找表
"""

from .denom_maps import (
    bank_metadata_to_cw20_denom_map,
    bank_metadata_to_denom_map,
    denoms_to_denom_map,
    merge_records,
    token_to_address_map,
    tokens_to_address_map,
    tokens_to_denom_map,
)

__all__ = [
    "merge_records",
    "denoms_to_denom_map",
    "tokens_to_denom_map",
    "token_to_address_map",
    "tokens_to_address_map",
    "bank_metadata_to_denom_map",
    "bank_metadata_to_cw20_denom_map",
]
