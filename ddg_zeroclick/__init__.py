"""
ddg_zeroclick - DuckDuckGo 零点击 API 客户端

示例::

    from ddg_zeroclick import zero_click

    result = zero_click("DuckDuckGo")
    print(result.abstract)
"""
from .clients.zeroclick_client import ZeroClickClient, build_request, zero_click
from .core.config import VERSION as __version__
from .core.exceptions import (
    ConfigError,
    DecodeError,
    RequestConstructionError,
    TransportError,
    ZeroClickError,
)
from .core.normalizer import normalize, parse_response
from .models import CategoryType, Icon, Link, LinkSection, QueryOptions, Result

__all__ = [
    "ZeroClickClient",
    "zero_click",
    "build_request",
    "parse_response",
    "normalize",
    "QueryOptions",
    "Result",
    "Link",
    "LinkSection",
    "Icon",
    "CategoryType",
    "ZeroClickError",
    "RequestConstructionError",
    "TransportError",
    "DecodeError",
    "ConfigError",
    "__version__"
]
