"""
代币标准分类

根据 denom 字符串的前缀判断代币标准，并根据网络环境给出数据文件名后缀。
"""

import logging
from enum import Enum
from typing import Callable, Optional, Union

from ..networks import Network, is_mainnet, is_testnet

logger = logging.getLogger(__name__)

CW20_ADDRESS_PREFIX = "inj"
CW20_ADDRESS_LENGTH = 42


class TokenType(str, Enum):
    """代币标准"""

    Ibc = "ibc"
    Cw20 = "cw20"
    Spl = "spl"
    Evm = "evm"
    Lp = "lp"
    Erc20 = "erc20"
    Native = "native"
    Symbol = "symbol"
    Unknown = "unknown"
    TokenFactory = "tokenFactory"
    InsuranceFund = "insuranceFund"


def is_cw20_contract_address(address: Optional[str]) -> bool:
    """判断字符串是否为 CW20 合约地址形状（inj 开头，长度 42）"""
    if not address:
        return False
    return address.startswith(CW20_ADDRESS_PREFIX) and len(address) == CW20_ADDRESS_LENGTH


def get_token_type(
    denom: Optional[str],
    is_contract_address: Callable[[str], bool] = is_cw20_contract_address,
) -> TokenType:
    """
    根据 denom 判断代币标准

    按固定优先级依次检查，命中即返回：
        peggy / 0x -> Erc20
        ibc/       -> Ibc
        合约地址   -> Cw20
        factory    -> TokenFactory

    Args:
        denom: denom 字符串
        is_contract_address: 合约地址判断函数

    Returns:
        TokenType，无法识别时为 TokenType.Unknown
    """
    if not denom:
        return TokenType.Unknown

    if denom.startswith("peggy") or denom.startswith("0x"):
        return TokenType.Erc20

    if denom.startswith("ibc/"):
        return TokenType.Ibc

    if is_contract_address(denom):
        return TokenType.Cw20

    if denom.startswith("factory"):
        return TokenType.TokenFactory

    return TokenType.Unknown


def get_network_file_name(network: Union[Network, str]) -> str:
    """
    网络对应的数据文件名后缀

    staging 同时属于主网分组，需要先单独判断；无法识别的网络名称视为 devnet。

    Returns:
        "staging" / "mainnet" / "testnet" / "devnet" 之一
    """
    try:
        network = Network.from_value(network)
    except ValueError:
        logger.warning(f"⚠️ 未知的网络 {network}，按 devnet 处理")
        return "devnet"

    if network == Network.Staging:
        return "staging"

    if is_mainnet(network):
        return "mainnet"

    if is_testnet(network):
        return "testnet"

    return "devnet"
