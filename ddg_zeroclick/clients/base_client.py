"""
基础 API 客户端类
封装 HTTP 传输和错误转换逻辑。
"""
import httpx
from typing import Dict, Optional

from ..core.config import load_config
from ..core.exceptions import TransportError
from ..core.log import get_logger

logger = get_logger(__name__)


class BaseApiClient:
    """
    API 客户端基类，负责发送已构造好的请求并返回响应体
    """

    def __init__(self, site_name: str, config: Optional[Dict] = None):
        """
        初始化基础客户端

        :param site_name: 站点名称，用于日志记录
        :param config: 配置字典，缺省项使用默认值
        :raises ConfigError: 配置校验失败
        """
        self.site_name = site_name
        self.config = load_config(config)
        self.http_config = self.config["http"]
        self.timeout = httpx.Timeout(self.http_config["timeout_seconds"])

    def _make_request(self, request: httpx.Request) -> bytes:
        """
        统一的 HTTP 请求处理方法

        非 2xx 状态码不视为错误，响应体照常返回交给解码步骤。

        :param request: 已构造好的请求
        :return: 响应体字节
        :raises TransportError: 网络、DNS、TLS 等传输层失败
        """
        try:
            with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                response = client.send(request)
        except httpx.HTTPError as e:
            logger.debug(f"ZeroClick[{self.site_name}]: 请求 {request.url} 失败: {e}")
            raise TransportError(f"请求 {request.url} 失败: {e}") from e

        if response.is_error:
            logger.warning(f"ZeroClick[{self.site_name}]: 上游返回状态码 {response.status_code}，仍尝试解码响应体。")
        else:
            logger.debug(f"ZeroClick[{self.site_name}]: 上游返回状态码 {response.status_code}")
        return response.content
