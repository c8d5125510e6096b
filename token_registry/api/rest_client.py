"""
REST 客户端封装模块

对链上 REST (LCD) 接口的最小封装：固定 base_url、超时，GET 返回 JSON。
"""

from typing import Any, Dict, Optional

import requests


class RestClientError(Exception):
    """REST 请求失败（连接、超时、非 2xx 状态码或响应不是 JSON）"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class HttpRestClient:
    """基于 requests.Session 的 REST 客户端"""

    def __init__(self, base_url: str, timeout_ms: int = 2000):
        """
        初始化 REST 客户端

        Args:
            base_url: 接口前缀，如 https://lcd.example/ibc/apps/transfer/v1/denom_traces/
            timeout_ms: 请求超时（毫秒）
        """
        self.base_url = base_url
        self.timeout_ms = timeout_ms
        self.session = requests.Session()
        self.session.headers.update({"accept": "application/json"})

    def _build_url(self, endpoint: str) -> str:
        if not endpoint:
            return self.base_url
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def get(self, endpoint: str = "", params: Optional[Dict] = None) -> Any:
        """
        发送 GET 请求

        Args:
            endpoint: 相对 base_url 的路径
            params: 查询参数

        Returns:
            解析后的 JSON 数据

        Raises:
            RestClientError: 请求失败或响应无法解析
        """
        url = self._build_url(endpoint)

        try:
            response = self.session.get(
                url, params=params, timeout=self.timeout_ms / 1000
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            status_code = None
            if getattr(e, "response", None) is not None:
                status_code = e.response.status_code
            raise RestClientError(f"API 请求失败: {url}: {e}", status_code) from e
        except ValueError as e:
            raise RestClientError(f"响应不是有效的 JSON: {url}: {e}") from e

    def close(self) -> None:
        self.session.close()
