#!/usr/bin/env python3
"""
代币注册表辅助工具主入口文件

使用方式:
    python main.py --network mainnet --tokens data/mainnet/tokens.json           # 统计代币标准
    python main.py --tokens data/mainnet/tokens.json --export-csv out/types.csv  # 导出分类结果
    python main.py --tokens data/mainnet/tokens.json --write-maps                # 生成 denom / 地址映射
    python main.py --network mainnet --trace ibc/<HASH> --symbol ATOM            # 查询 denom trace
    python main.py --test                                                         # 运行单元测试

核心模块使用:
    from token_registry import JsonFileStore, tokens_to_denom_map, get_denom_trace
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from token_registry.api.denom_trace import DenomTraceResolver
from token_registry.builders.denom_maps import token_to_address_map, tokens_to_denom_map
from token_registry.classification.summary import (
    export_token_types_csv,
    get_token_type_summary,
)
from token_registry.classification.token_type import get_network_file_name
from token_registry.config import load_config
from token_registry.networks import Network
from token_registry.storage.json_store import JsonFileStore
from token_registry.utils.log_utils import setup_logger


def load_tokens(store: JsonFileStore, tokens_path: str) -> list:
    """读取代币快照，只保留带 denom 的字典记录"""
    tokens = store.read_json_file(tokens_path, fallback=[])

    if not isinstance(tokens, list):
        print(f"⚠️ 代币快照不是列表，已忽略: {tokens_path}")
        return []

    return [token for token in tokens if isinstance(token, dict) and token.get("denom")]


def show_token_summary(store: JsonFileStore, tokens_path: str, network: Network):
    """显示代币快照的代币标准统计"""
    print(f"🚀 代币快照: {tokens_path} ({get_network_file_name(network)})")
    print("=" * 50)

    denoms = [token["denom"] for token in load_tokens(store, tokens_path)]

    summary = get_token_type_summary(denoms)
    print(f"📊 共 {summary.pop('total')} 个denom:")
    for token_type, count in summary.items():
        if count:
            print(f"  {token_type}: {count}")

    return denoms


def write_token_maps(store: JsonFileStore, tokens_path: str) -> bool:
    """在代币快照同目录下写入 denomMap.json 与 addressMap.json"""
    tokens = load_tokens(store, tokens_path)
    output_dir = Path(tokens_path).parent

    denom_ok = store.write_json_file(output_dir / "denomMap.json", tokens_to_denom_map(tokens))
    address_ok = store.write_json_file(
        output_dir / "addressMap.json", token_to_address_map(tokens)
    )

    if denom_ok and address_ok:
        print(f"✅ 映射已写入: {output_dir}")
    else:
        print(f"❌ 映射写入失败: {output_dir}")

    return denom_ok and address_ok


def show_denom_trace(resolver: DenomTraceResolver, denom: str, network: Network, symbol=None):
    """查询并打印 denom trace"""
    trace = asyncio.run(resolver.resolve(denom, network, symbol))
    print(json.dumps(trace.to_dict(), indent=2, ensure_ascii=False))
    return trace


def run_tests():
    """运行所有单元测试"""
    print("🧪 运行所有单元测试...")
    import subprocess

    try:
        result = subprocess.run(
            [sys.executable, "-m", "unittest", "discover", "tests"],
            capture_output=True,
            text=True,
            check=True,
        )
        print(result.stdout)
        if result.stderr:
            print("--- 标准错误输出 ---\n", result.stderr)
    except subprocess.CalledProcessError as e:
        print("❌ 部分测试未通过:")
        print(e.stdout)
        print(e.stderr)


def main(argv=None):
    """项目主入口函数

    解析命令行参数并根据选项运行对应功能。
    """
    parser = argparse.ArgumentParser(description="代币注册表辅助工具")
    parser.add_argument("--network", default="mainnet", help="网络环境 (默认: mainnet)")
    parser.add_argument("--tokens", help="代币快照 JSON 路径（相对数据根目录）")
    parser.add_argument("--export-csv", help="导出代币标准分类 CSV 的路径")
    parser.add_argument("--write-maps", action="store_true", help="生成 denom / 地址映射文件")
    parser.add_argument("--trace", help="查询 denom trace，如 ibc/<HASH>")
    parser.add_argument("--symbol", help="denom trace 查询失败时的回退符号")
    parser.add_argument("--env-file", help=".env 文件路径")
    parser.add_argument("--test", action="store_true", help="运行单元测试")

    args = parser.parse_args(argv)

    if args.test:
        run_tests()
        return 0

    config = load_config(args.env_file)
    logger = setup_logger("token_registry", log_file=config.log_file)

    try:
        network = Network.from_value(args.network)
    except ValueError as e:
        parser.error(str(e))

    store = JsonFileStore.from_config(config, logger=logger)

    if args.trace:
        resolver = DenomTraceResolver(
            timeout_ms=config.rest_timeout_ms,
            unknown_symbol=config.unknown_symbol,
            logger=logger,
        )
        show_denom_trace(resolver, args.trace, network, args.symbol)

    if args.tokens:
        denoms = show_token_summary(store, args.tokens, network)
        if args.export_csv:
            try:
                csv_path = store.resolve(args.export_csv)
            except ValueError as e:
                parser.error(str(e))
            export_token_types_csv(denoms, csv_path)
        if args.write_maps:
            write_token_maps(store, args.tokens)
    elif not args.trace:
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
