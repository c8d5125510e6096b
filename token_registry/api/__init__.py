"""
链上 REST 接口封装
"""

from .denom_trace import DenomTrace, DenomTraceResolver, get_denom_trace
from .rest_client import HttpRestClient, RestClientError

__all__ = [
    "DenomTrace",
    "DenomTraceResolver",
    "get_denom_trace",
    "HttpRestClient",
    "RestClientError",
]
