"""
配置模块测试
"""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# 添加项目根目录到Python路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from token_registry.config import (
    DEFAULT_REST_TIMEOUT_MS,
    DEFAULT_ROOT_DIR,
    RegistryConfig,
    load_config,
)
from token_registry.networks import Network

ENV_KEYS = [
    "TOKEN_REGISTRY_ROOT",
    "TOKEN_REGISTRY_DATA_DIR",
    "TOKEN_REGISTRY_REST_TIMEOUT_MS",
    "TOKEN_REGISTRY_LOG_FILE",
]


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        # 指向一个空的 .env，避免读到开发环境里的配置
        self.env_file = Path(self.temp_dir.name) / ".env"
        self.env_file.write_text("", encoding="utf-8")

        env = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
        patcher = patch.dict(os.environ, env, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_defaults(self):
        config = load_config(str(self.env_file))

        self.assertEqual(config.root_dir, DEFAULT_ROOT_DIR)
        self.assertEqual(config.data_dir, "data")
        self.assertEqual(config.rest_timeout_ms, DEFAULT_REST_TIMEOUT_MS)
        self.assertEqual(config.unknown_symbol, "UNKNOWN")
        self.assertIsNone(config.log_file)

    def test_environment_overrides(self):
        os.environ["TOKEN_REGISTRY_ROOT"] = self.temp_dir.name
        os.environ["TOKEN_REGISTRY_DATA_DIR"] = "snapshots"
        os.environ["TOKEN_REGISTRY_REST_TIMEOUT_MS"] = "5000"

        config = load_config(str(self.env_file))

        self.assertEqual(config.root_dir, Path(self.temp_dir.name))
        self.assertEqual(config.data_dir, "snapshots")
        self.assertEqual(config.rest_timeout_ms, 5000)

    def test_env_file_values(self):
        self.env_file.write_text(
            "TOKEN_REGISTRY_REST_TIMEOUT_MS=750\nTOKEN_REGISTRY_LOG_FILE=logs/registry.log\n",
            encoding="utf-8",
        )

        config = load_config(str(self.env_file))

        self.assertEqual(config.rest_timeout_ms, 750)
        self.assertEqual(config.log_file, "logs/registry.log")

    def test_invalid_timeout(self):
        os.environ["TOKEN_REGISTRY_REST_TIMEOUT_MS"] = "fast"
        with self.assertRaises(ValueError):
            load_config(str(self.env_file))

        os.environ["TOKEN_REGISTRY_REST_TIMEOUT_MS"] = "0"
        with self.assertRaises(ValueError):
            load_config(str(self.env_file))


class TestRegistryConfig(unittest.TestCase):
    def test_data_path_uses_network_file_name(self):
        config = RegistryConfig(root_dir="/tmp/registry")

        self.assertEqual(config.root_dir, Path("/tmp/registry"))
        self.assertEqual(
            config.data_path(Network.Staging), Path("/tmp/registry/data/staging")
        )
        self.assertEqual(
            config.data_path("mainnetSentry"), Path("/tmp/registry/data/mainnet")
        )
        self.assertEqual(config.data_path(Network.Devnet2), Path("/tmp/registry/data/devnet"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
