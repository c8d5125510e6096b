"""
网络环境定义

提供 Injective 各网络环境的枚举、环境分组判断以及 REST 端点解析。
端点解析函数可以在构造 DenomTraceResolver 时替换。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class Network(str, Enum):
    """链网络环境"""

    Mainnet = "mainnet"
    MainnetK8s = "mainnetK8s"
    MainnetLB = "mainnetLB"
    MainnetSentry = "mainnetSentry"
    Staging = "staging"
    Internal = "internal"
    Testnet = "testnet"
    TestnetK8s = "testnetK8s"
    TestnetOld = "testnetOld"
    TestnetSentry = "testnetSentry"
    Devnet = "devnet"
    Devnet1 = "devnet1"
    Devnet2 = "devnet2"
    Local = "local"

    @classmethod
    def from_value(cls, value: Union["Network", str]) -> "Network":
        """
        将字符串解析为网络枚举（不区分大小写）

        Raises:
            ValueError: 未知的网络名称
        """
        if isinstance(value, cls):
            return value

        lookup = {member.value.lower(): member for member in cls}
        network = lookup.get(str(value).strip().lower())
        if network is None:
            raise ValueError(
                f"未知的网络: {value}，可选值: {', '.join(m.value for m in cls)}"
            )
        return network


MAINNET_NETWORKS = frozenset(
    {
        Network.Mainnet,
        Network.MainnetK8s,
        Network.MainnetLB,
        Network.MainnetSentry,
        Network.Staging,
        Network.Internal,
    }
)

TESTNET_NETWORKS = frozenset(
    {
        Network.Testnet,
        Network.TestnetK8s,
        Network.TestnetOld,
        Network.TestnetSentry,
    }
)


def is_mainnet(network: Union[Network, str]) -> bool:
    return Network.from_value(network) in MAINNET_NETWORKS


def is_testnet(network: Union[Network, str]) -> bool:
    return Network.from_value(network) in TESTNET_NETWORKS


def is_devnet(network: Union[Network, str]) -> bool:
    return not is_mainnet(network) and not is_testnet(network)


@dataclass(frozen=True)
class NetworkEndpoints:
    """单个网络的服务端点"""

    rest: str
    grpc: str
    indexer: str


_ENDPOINTS: Dict[Network, NetworkEndpoints] = {
    Network.Mainnet: NetworkEndpoints(
        rest="https://sentry.lcd.injective.network",
        grpc="https://sentry.grpc-web.injective.network",
        indexer="https://sentry.exchange.grpc-web.injective.network",
    ),
    Network.MainnetK8s: NetworkEndpoints(
        rest="https://k8s.global.mainnet.lcd.injective.network",
        grpc="https://k8s.global.mainnet.chain.grpc-web.injective.network",
        indexer="https://k8s.global.mainnet.exchange.grpc-web.injective.network",
    ),
    Network.MainnetLB: NetworkEndpoints(
        rest="https://k8s.global.mainnet.lcd.injective.network",
        grpc="https://k8s.global.mainnet.chain.grpc-web.injective.network",
        indexer="https://k8s.global.mainnet.exchange.grpc-web.injective.network",
    ),
    Network.MainnetSentry: NetworkEndpoints(
        rest="https://sentry.lcd.injective.network",
        grpc="https://sentry.grpc-web.injective.network",
        indexer="https://sentry.exchange.grpc-web.injective.network",
    ),
    Network.Staging: NetworkEndpoints(
        rest="https://staging.lcd.injective.network",
        grpc="https://staging.grpc-web.injective.network",
        indexer="https://staging.api.injective.network",
    ),
    Network.Internal: NetworkEndpoints(
        rest="https://products.lcd.injective.network",
        grpc="https://products.grpc-web.injective.network",
        indexer="https://products.exchange.grpc-web.injective.network",
    ),
    Network.Testnet: NetworkEndpoints(
        rest="https://testnet.sentry.lcd.injective.network",
        grpc="https://testnet.sentry.chain.grpc-web.injective.network",
        indexer="https://testnet.sentry.exchange.grpc-web.injective.network",
    ),
    Network.TestnetK8s: NetworkEndpoints(
        rest="https://k8s.testnet.lcd.injective.network",
        grpc="https://k8s.testnet.chain.grpc-web.injective.network",
        indexer="https://k8s.testnet.exchange.grpc-web.injective.network",
    ),
    Network.TestnetOld: NetworkEndpoints(
        rest="https://testnet.lcd.injective.dev",
        grpc="https://testnet.grpc-web.injective.dev",
        indexer="https://testnet.exchange.grpc-web.injective.dev",
    ),
    Network.TestnetSentry: NetworkEndpoints(
        rest="https://testnet.sentry.lcd.injective.network",
        grpc="https://testnet.sentry.chain.grpc-web.injective.network",
        indexer="https://testnet.sentry.exchange.grpc-web.injective.network",
    ),
    Network.Devnet: NetworkEndpoints(
        rest="https://devnet.lcd.injective.dev",
        grpc="https://devnet.grpc-web.injective.dev",
        indexer="https://devnet.api.injective.dev",
    ),
    Network.Devnet1: NetworkEndpoints(
        rest="https://devnet-1.lcd.injective.dev",
        grpc="https://devnet-1.grpc-web.injective.dev",
        indexer="https://devnet-1.api.injective.dev",
    ),
    Network.Devnet2: NetworkEndpoints(
        rest="https://devnet-2.lcd.injective.dev",
        grpc="https://devnet-2.grpc-web.injective.dev",
        indexer="https://devnet-2.api.injective.dev",
    ),
    Network.Local: NetworkEndpoints(
        rest="http://localhost:10337",
        grpc="http://localhost:9091",
        indexer="http://localhost:4444",
    ),
}


def get_network_endpoints(network: Union[Network, str]) -> NetworkEndpoints:
    """
    获取指定网络的服务端点

    Args:
        network: 网络枚举或其字符串值

    Returns:
        NetworkEndpoints 对象
    """
    return _ENDPOINTS[Network.from_value(network)]
