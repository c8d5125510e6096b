"""
代币注册表辅助工具使用示例

演示分类、映射构建、denom trace 查询和 JSON 快照读写
"""

import asyncio
import os
import sys
import tempfile

# 添加项目根目录到Python路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from token_registry import (
    JsonFileStore,
    Network,
    get_denom_trace,
    get_network_file_name,
    get_token_type,
    tokens_to_address_map,
    tokens_to_denom_map,
)


def example_classification():
    """代币标准分类示例"""
    print("🔹 代币标准分类")

    for denom in ["peggy0xdAC17F958D2ee523a2206206994597C13D831ec7", "ibc/ABCD", "factory/inj1x/ninja", "inj"]:
        print(f"  {denom}: {get_token_type(denom).value}")

    for network in [Network.Mainnet, Network.Staging, Network.TestnetSentry, Network.Local]:
        print(f"  {network.value} -> {get_network_file_name(network)}")


def example_maps():
    """映射构建示例"""
    print("\n🔹 映射构建")

    tokens = [
        {"denom": "ATOM", "symbol": "ATOM"},
        {"denom": "atom", "decimals": 6},
        {"denom": "peggy0xABC", "address": "0xABC", "symbol": "USDT"},
        {"denom": "wrapped-usdt", "address": "0xabc", "symbol": "wUSDT"},
    ]

    print(f"  denom map: {tokens_to_denom_map(tokens)}")
    print(f"  address map: {tokens_to_address_map(tokens)}")


def example_denom_trace():
    """denom trace 查询示例（需要网络）"""
    print("\n🔹 denom trace 查询")

    trace = asyncio.run(
        get_denom_trace(
            "ibc/C4CFF46FD6DE35CA4CF4CE031E643C8FDC9BA4B99AE598E9B0ED98FE3A2319F9",
            Network.Mainnet,
            "ATOM",
        )
    )
    print(f"  {trace.to_dict()}")


def example_json_store():
    """JSON 快照读写示例"""
    print("\n🔹 JSON 快照读写")

    with tempfile.TemporaryDirectory() as root_dir:
        store = JsonFileStore(root_dir)
        store.write_json_file("data/mainnet/tokens.json", [{"denom": "inj", "symbol": "INJ"}])
        print(f"  读取: {store.read_json_file('data/mainnet/tokens.json')}")
        print(f"  不存在的文件: {store.read_json_file('data/mainnet/missing.json', fallback={})}")


if __name__ == "__main__":
    example_classification()
    example_maps()
    example_denom_trace()
    example_json_store()
