"""
DuckDuckGo 零点击 API 客户端。
继承自 BaseApiClient，负责构造请求并把响应交给 normalizer。
"""
import httpx
from typing import Dict, Optional

from .base_client import BaseApiClient
from ..core.config import load_config
from ..core.exceptions import RequestConstructionError
from ..core.log import get_logger
from ..core.normalizer import parse_response
from ..models.options import QueryOptions
from ..models.response import Result

logger = get_logger(__name__)

# 选项字段与查询参数同名，仅在开关打开时发送
_FLAG_PARAMS = ("no_html", "skip_disambig", "no_redirect")


def build_request(query: str, options: Optional[QueryOptions] = None, config: Optional[Dict] = None) -> httpx.Request:
    """
    构造一次零点击查询的 GET 请求，不发送任何网络请求。

    query 不做任何校验，空字符串也原样发送。

    :param query: 查询文本
    :param options: 查询选项，None 表示全部使用默认值
    :param config: 配置字典，用于 api_host 和 user_agent
    :return: 构造好的 httpx.Request
    :raises RequestConstructionError: URL 无法构造
    """
    options = options or QueryOptions()
    http_config = load_config(config)["http"]

    scheme = "https" if options.secure else "http"
    params = {
        "q": query,
        "format": "json",
    }
    for flag in _FLAG_PARAMS:
        if getattr(options, flag):
            params[flag] = "1"

    try:
        return httpx.Request(
            "GET",
            f"{scheme}://{http_config['api_host']}/",
            params=params,
            headers={"User-Agent": http_config["user_agent"]},
        )
    except (httpx.InvalidURL, ValueError) as e:
        logger.debug(f"ZeroClick[RequestBuilder]: 无法为查询 {query!r} 构造请求: {e}")
        raise RequestConstructionError(f"无法为查询 {query!r} 构造请求: {e}") from e


class ZeroClickClient(BaseApiClient):
    """零点击 API 客户端"""

    def __init__(self, options: Optional[QueryOptions] = None, config: Optional[Dict] = None):
        super().__init__(site_name="ZeroClickClient", config=config)
        self.options = options or QueryOptions()

    def zero_click(self, query: str) -> Result:
        """
        查询零点击 API 并返回规范化后的结果。

        :param query: 查询文本
        :return: 规范化后的 Result，空响应体返回空结果
        :raises RequestConstructionError: 请求无法构造
        :raises TransportError: 传输层失败，不做重试
        :raises DecodeError: 响应体不是合法的 JSON 对象
        """
        request = build_request(query, self.options, self.config)
        logger.debug(f"ZeroClick[{self.site_name}]: GET {request.url}")
        body = self._make_request(request)
        return parse_response(body)


def zero_click(query: str, options: Optional[QueryOptions] = None) -> Result:
    """
    零配置的便捷入口，每次调用都使用一个新的客户端。

    :param query: 查询文本
    :param options: 查询选项，None 表示全部使用默认值
    :return: 规范化后的 Result
    """
    return ZeroClickClient(options).zero_click(query)
