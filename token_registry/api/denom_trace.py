"""
IBC denom trace 解析

根据 ibc/<hash> 查询链上 transfer 模块的 denom trace，得到跨链路径、
原始 denom 和通道 ID。查询失败时返回回退结果，不会向调用方抛出异常。
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from ..config import DEFAULT_REST_TIMEOUT_MS
from ..models import UNKNOWN_SYMBOL
from ..networks import Network, NetworkEndpoints, get_network_endpoints
from .rest_client import HttpRestClient

IBC_PREFIX = "ibc/"
DENOM_TRACES_PATH = "/ibc/apps/transfer/v1/denom_traces/"


def _network_name(network: Union[Network, str]) -> str:
    return network.value if isinstance(network, Network) else str(network)


@dataclass(frozen=True)
class DenomTrace:
    """denom trace 结果，空字符串表示未解析"""

    path: str
    base_denom: str
    channel_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "path": self.path,
            "baseDenom": self.base_denom,
            "channelId": self.channel_id,
        }


class DenomTraceResolver:
    """IBC denom trace 解析器"""

    def __init__(
        self,
        endpoint_resolver: Callable[
            [Union[Network, str]], NetworkEndpoints
        ] = get_network_endpoints,
        client_factory: Callable[..., HttpRestClient] = HttpRestClient,
        timeout_ms: int = DEFAULT_REST_TIMEOUT_MS,
        unknown_symbol: str = UNKNOWN_SYMBOL,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            endpoint_resolver: 网络 -> 端点的解析函数
            client_factory: 以 (base_url, timeout_ms=...) 构造 REST 客户端
            timeout_ms: 请求超时（毫秒）
            unknown_symbol: 未提供回退符号时使用的占位符号
            logger: 日志输出，默认为模块 logger
        """
        self.endpoint_resolver = endpoint_resolver
        self.client_factory = client_factory
        self.timeout_ms = timeout_ms
        self.unknown_symbol = unknown_symbol
        self.logger = logger or logging.getLogger(__name__)

    def _fallback(self, symbol: Optional[str]) -> DenomTrace:
        return DenomTrace(path="", base_denom=symbol or self.unknown_symbol, channel_id="")

    def _fetch(self, trace_hash: str, network: Union[Network, str]) -> Dict:
        endpoints = self.endpoint_resolver(network)
        client = self.client_factory(
            f"{endpoints.rest.rstrip('/')}{DENOM_TRACES_PATH}",
            timeout_ms=self.timeout_ms,
        )
        try:
            return client.get(trace_hash)
        finally:
            client.close()

    async def resolve(
        self,
        hash: str,
        network: Union[Network, str],
        symbol: Optional[str] = None,
    ) -> DenomTrace:
        """
        查询 IBC denom trace

        Args:
            hash: denom，形如 ibc/<HASH>；非 IBC denom 不会发起请求
            network: 网络环境
            symbol: 查询失败或非 IBC denom 时作为 base_denom 的回退符号

        Returns:
            DenomTrace，失败时 path / channel_id 为空字符串
        """
        if not hash or not hash.startswith(IBC_PREFIX):
            return self._fallback(symbol)

        trace_hash = hash[len(IBC_PREFIX):]

        try:
            data = await asyncio.to_thread(self._fetch, trace_hash, network)

            denom_trace = data["denom_trace"]
            path = denom_trace["path"]
            base_denom = denom_trace["base_denom"]

            self.logger.info(f"✅ 获取 {_network_name(network)} ibc denom trace 成功: {hash}")

            return DenomTrace(
                path=path,
                base_denom=base_denom,
                channel_id=path.split("/")[-1] if "/" in path else "",
            )
        except Exception as e:
            self.logger.error(f"❌ 获取 denom trace 失败 ({hash}): {e}")
            return self._fallback(symbol)


async def get_denom_trace(
    hash: str,
    network: Union[Network, str],
    symbol: Optional[str] = None,
) -> DenomTrace:
    """使用默认解析器查询 denom trace"""
    return await DenomTraceResolver().resolve(hash, network, symbol)
