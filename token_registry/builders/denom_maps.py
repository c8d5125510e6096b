"""
denom / 地址映射构建

将代币记录或 bank metadata 列表折叠为以规范化 denom（小写）或地址为键的字典。

合并规则：
    - 同一键首次出现时直接放入
    - 之后出现的记录浅合并到已有记录之上：同名字段被后者覆盖，后者缺失的字段保留
    - tokens_to_address_map 例外：保留同一地址下的全部记录（如包装变体），不合并

所有函数都不会修改传入的列表或记录。
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping

from ..classification.token_type import is_cw20_contract_address
from ..models import BankMetadata, Record, TokenRecord


def merge_records(base: Mapping[str, Any], update: Mapping[str, Any]) -> Record:
    """浅合并两条记录，返回新字典"""
    merged = dict(base)
    merged.update(update)
    return merged


def _merge_into(result: Dict[str, Record], key: str, record: Mapping[str, Any]) -> None:
    if key not in result:
        result[key] = dict(record)
        return

    result[key] = merge_records(result[key], record)


def _address_key(token: Mapping[str, Any]) -> str:
    return (token.get("address") or token["denom"]).lower()


def denoms_to_denom_map(denoms: Iterable[str]) -> Dict[str, str]:
    """
    {小写 denom: 首次出现的原始 denom}

    例如 ["Atom", "atom", "OSMO"] -> {"atom": "Atom", "osmo": "OSMO"}
    """
    result: Dict[str, str] = {}

    for denom in denoms:
        result.setdefault(denom.lower(), denom)

    return result


def tokens_to_denom_map(tokens: Iterable[TokenRecord]) -> Dict[str, TokenRecord]:
    """以小写 denom 为键合并代币记录"""
    result: Dict[str, Record] = {}

    for token in tokens:
        _merge_into(result, token["denom"].lower(), token)

    return result


def token_to_address_map(tokens: Iterable[TokenRecord]) -> Dict[str, TokenRecord]:
    """以小写地址（无地址时用 denom）为键合并代币记录"""
    result: Dict[str, Record] = {}

    for token in tokens:
        _merge_into(result, _address_key(token), token)

    return result


def tokens_to_address_map(
    tokens: Iterable[TokenRecord],
) -> Dict[str, List[TokenRecord]]:
    """以小写地址（无地址时用 denom）为键收集全部代币记录，保持出现顺序"""
    result: Dict[str, List[TokenRecord]] = {}

    for token in tokens:
        result.setdefault(_address_key(token), []).append(token)

    return result


def bank_metadata_to_denom_map(
    metadatas: Iterable[BankMetadata],
) -> Dict[str, BankMetadata]:
    """以小写 denom 为键合并 bank metadata"""
    result: Dict[str, Record] = {}

    for metadata in metadatas:
        _merge_into(result, metadata["denom"].lower(), metadata)

    return result


def bank_metadata_to_cw20_denom_map(
    metadatas: Iterable[BankMetadata],
    is_contract_address: Callable[[str], bool] = is_cw20_contract_address,
) -> Dict[str, BankMetadata]:
    """
    以 CW20 合约地址为键合并 bank metadata

    取小写 denom 按 "/" 切分后的最后一段作为候选合约地址：
        - 最后一段为空（denom 为空或以 "/" 结尾）时跳过该记录
        - 是合约地址形状时以合约地址为键
        - 否则以完整的小写 denom 为键

    Args:
        metadatas: bank metadata 列表
        is_contract_address: 合约地址判断函数

    Returns:
        {键: 合并后的 metadata}
    """
    result: Dict[str, Record] = {}

    for metadata in metadatas:
        formatted_denom = metadata["denom"].lower()
        contract_address = formatted_denom.split("/")[-1]

        if not contract_address:
            continue

        # 合约地址键可能与另一条记录的完整 denom 键相同，此时直接合并
        identifier = (
            contract_address if is_contract_address(contract_address) else formatted_denom
        )
        _merge_into(result, identifier, metadata)

    return result
