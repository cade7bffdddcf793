"""
ddg_zeroclick - Pytest 配置和共享 Fixtures
"""
from unittest.mock import MagicMock, patch

import pytest

from payloads import DISAMBIGUATION_PAYLOAD, DUCKDUCKGO_PAYLOAD, make_response, to_bytes


# --- Pytest Fixtures ---

@pytest.fixture
def duckduckgo_body():
    """摘要为 DuckDuckGo 的响应体"""
    return to_bytes(DUCKDUCKGO_PAYLOAD)


@pytest.fixture
def disambiguation_body():
    """同时包含普通链接和分组的消歧义响应体"""
    return to_bytes(DISAMBIGUATION_PAYLOAD)


@pytest.fixture
def mock_http_client():
    """
    替换 httpx.Client，返回用于配置 send 的 mock 实例。
    默认返回状态码 200 和空响应体。
    """
    with patch("httpx.Client") as mock_client_cls:
        mock_instance = MagicMock()
        mock_client_cls.return_value.__enter__.return_value = mock_instance
        mock_instance.send = MagicMock(return_value=make_response(b""))
        yield mock_instance


