"""
IBC denom trace 解析测试

通过注入端点解析函数和客户端工厂模拟 REST 响应，覆盖：
1. 非 IBC denom 不发起请求
2. 成功解析 path / base_denom / channel_id
3. 请求失败、响应结构异常时回退
"""

import logging
import os
import sys
import unittest
from unittest.mock import MagicMock, patch

# 添加项目根目录到Python路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from token_registry.api.denom_trace import DenomTrace, DenomTraceResolver, get_denom_trace
from token_registry.api.rest_client import RestClientError
from token_registry.models import UNKNOWN_SYMBOL
from token_registry.networks import Network, NetworkEndpoints

ENDPOINTS = NetworkEndpoints(
    rest="https://lcd.example/", grpc="https://grpc.example", indexer="https://idx.example"
)
TRACE_HASH = "C4CFF46FD6DE35CA4CF4CE031E643C8FDC9BA4B99AE598E9B0ED98FE3A2319F9"


class TestDenomTraceResolver(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = MagicMock()
        self.client_factory = MagicMock(return_value=self.client)
        self.endpoint_resolver = MagicMock(return_value=ENDPOINTS)
        self.logger = logging.getLogger("tests.denom_trace")
        self.resolver = DenomTraceResolver(
            endpoint_resolver=self.endpoint_resolver,
            client_factory=self.client_factory,
            logger=self.logger,
        )

    async def test_non_ibc_denom_skips_network(self):
        trace = await self.resolver.resolve("uatom", Network.Mainnet, "ATOM")

        self.assertEqual(trace, DenomTrace(path="", base_denom="ATOM", channel_id=""))
        self.endpoint_resolver.assert_not_called()
        self.client_factory.assert_not_called()

    async def test_non_ibc_denom_without_symbol(self):
        trace = await self.resolver.resolve("factory/inj1x/abc", Network.Mainnet)
        self.assertEqual(trace.base_denom, UNKNOWN_SYMBOL)

    async def test_success(self):
        self.client.get.return_value = {
            "denom_trace": {"path": "transfer/channel-1", "base_denom": "uatom"}
        }

        with self.assertLogs("tests.denom_trace", level="INFO") as logs:
            trace = await self.resolver.resolve(f"ibc/{TRACE_HASH}", Network.Mainnet)

        self.assertEqual(
            trace,
            DenomTrace(path="transfer/channel-1", base_denom="uatom", channel_id="channel-1"),
        )
        self.client_factory.assert_called_once_with(
            "https://lcd.example/ibc/apps/transfer/v1/denom_traces/", timeout_ms=2000
        )
        self.client.get.assert_called_once_with(TRACE_HASH)
        self.client.close.assert_called_once()
        self.endpoint_resolver.assert_called_once_with(Network.Mainnet)
        self.assertTrue(any("mainnet" in line for line in logs.output))

    async def test_multi_hop_path_uses_last_segment(self):
        self.client.get.return_value = {
            "denom_trace": {
                "path": "transfer/channel-8/transfer/channel-141",
                "base_denom": "uosmo",
            }
        }
        trace = await self.resolver.resolve(f"ibc/{TRACE_HASH}", Network.Testnet)
        self.assertEqual(trace.channel_id, "channel-141")

    async def test_path_without_slash_has_empty_channel(self):
        self.client.get.return_value = {"denom_trace": {"path": "", "base_denom": "uatom"}}
        trace = await self.resolver.resolve(f"ibc/{TRACE_HASH}", Network.Mainnet)
        self.assertEqual(trace, DenomTrace(path="", base_denom="uatom", channel_id=""))

    async def test_request_failure_falls_back(self):
        self.client.get.side_effect = RestClientError("timeout")

        with self.assertLogs("tests.denom_trace", level="ERROR") as logs:
            trace = await self.resolver.resolve(f"ibc/{TRACE_HASH}", Network.Mainnet)

        self.assertEqual(
            trace, DenomTrace(path="", base_denom=UNKNOWN_SYMBOL, channel_id="")
        )
        self.assertTrue(any(TRACE_HASH in line for line in logs.output))
        self.client.close.assert_called_once()

    async def test_malformed_body_falls_back_to_symbol(self):
        self.client.get.return_value = {"unexpected": True}

        with self.assertLogs("tests.denom_trace", level="ERROR"):
            trace = await self.resolver.resolve(f"ibc/{TRACE_HASH}", Network.Mainnet, "ATOM")

        self.assertEqual(trace, DenomTrace(path="", base_denom="ATOM", channel_id=""))

    async def test_endpoint_failure_falls_back(self):
        self.endpoint_resolver.side_effect = ValueError("未知的网络")

        with self.assertLogs("tests.denom_trace", level="ERROR"):
            trace = await self.resolver.resolve(f"ibc/{TRACE_HASH}", "moonnet")

        self.assertEqual(trace.base_denom, UNKNOWN_SYMBOL)
        self.client_factory.assert_not_called()

    async def test_custom_unknown_symbol_and_timeout(self):
        resolver = DenomTraceResolver(
            endpoint_resolver=self.endpoint_resolver,
            client_factory=self.client_factory,
            timeout_ms=500,
            unknown_symbol="???",
            logger=self.logger,
        )
        self.client.get.side_effect = RestClientError("boom")

        with self.assertLogs("tests.denom_trace", level="ERROR"):
            trace = await resolver.resolve(f"ibc/{TRACE_HASH}", Network.Devnet)

        self.assertEqual(trace.base_denom, "???")
        self.assertEqual(self.client_factory.call_args.kwargs["timeout_ms"], 500)

    def test_to_dict(self):
        trace = DenomTrace(path="transfer/channel-1", base_denom="uatom", channel_id="channel-1")
        self.assertEqual(
            trace.to_dict(),
            {"path": "transfer/channel-1", "baseDenom": "uatom", "channelId": "channel-1"},
        )


class TestGetDenomTrace(unittest.IsolatedAsyncioTestCase):
    async def test_default_resolver_uses_http_client(self):
        with patch("token_registry.api.rest_client.requests.Session.get") as mock_get:
            response = MagicMock()
            response.json.return_value = {
                "denom_trace": {"path": "transfer/channel-2", "base_denom": "uusdc"}
            }
            mock_get.return_value = response

            trace = await get_denom_trace(f"ibc/{TRACE_HASH}", Network.Mainnet)

        self.assertEqual(trace.base_denom, "uusdc")
        self.assertEqual(trace.channel_id, "channel-2")
        url = mock_get.call_args.args[0]
        self.assertEqual(
            url,
            f"https://sentry.lcd.injective.network/ibc/apps/transfer/v1/denom_traces/{TRACE_HASH}",
        )
        self.assertEqual(mock_get.call_args.kwargs["timeout"], 2.0)

    async def test_non_ibc_symbol(self):
        trace = await get_denom_trace("uatom", Network.Mainnet, "ATOM")
        self.assertEqual(trace, DenomTrace(path="", base_denom="ATOM", channel_id=""))


if __name__ == "__main__":
    unittest.main(verbosity=2)
