"""
ddg_zeroclick - 配置与日志单元测试
"""
import logging

import pytest

from ddg_zeroclick.core.config import API_HOST, DEFAULT_CONFIG, USER_AGENT, VERSION, load_config
from ddg_zeroclick.core.exceptions import ConfigError
from ddg_zeroclick.core.log import get_logger


class TestLoadConfig:
    """测试配置合并与校验"""

    def test_defaults(self):
        """测试 None 配置使用默认值"""
        # Act
        config = load_config(None)

        # Assert
        assert config["http"]["timeout_seconds"] == 10
        assert config["http"]["api_host"] == API_HOST
        assert config["http"]["user_agent"] == USER_AGENT
        assert VERSION in USER_AGENT

    def test_partial_override_keeps_other_defaults(self):
        """测试部分覆盖时其余项保持默认"""
        # Act
        config = load_config({"http": {"timeout_seconds": 2.5}})

        # Assert
        assert config["http"]["timeout_seconds"] == 2.5
        assert config["http"]["api_host"] == API_HOST

    @pytest.mark.parametrize("config", [{"http": None}, {}])
    def test_missing_http_section_uses_defaults(self, config):
        """测试 http 为 None 或缺失时使用默认值"""
        assert load_config(config)["http"]["api_host"] == API_HOST

    @pytest.mark.parametrize("config", [{"http": "fast"}, {"http": [1]}, ["http"]])
    def test_non_dict_config_rejected(self, config):
        """测试非字典配置抛出 ConfigError"""
        with pytest.raises(ConfigError):
            load_config(config)

    def test_defaults_are_not_mutated(self):
        """测试合并不修改默认配置"""
        load_config({"http": {"api_host": "localhost"}})
        assert DEFAULT_CONFIG["http"]["api_host"] == API_HOST

    @pytest.mark.parametrize("timeout", [0, -1, "10", None, True])
    def test_invalid_timeout(self, timeout):
        """测试非法超时时间抛出 ConfigError"""
        with pytest.raises(ConfigError):
            load_config({"http": {"timeout_seconds": timeout}})

    @pytest.mark.parametrize("key", ["api_host", "user_agent"])
    def test_empty_strings_rejected(self, key):
        """测试空的 api_host / user_agent 抛出 ConfigError"""
        with pytest.raises(ConfigError):
            load_config({"http": {key: "  "}})


class TestGetLogger:
    """测试日志记录器"""

    def test_handler_added_once(self):
        """测试重复获取同一 logger 不会重复添加 handler"""
        # Act
        first = get_logger("ddg_zeroclick.tests.once")
        second = get_logger("ddg_zeroclick.tests.once")

        # Assert
        assert first is second
        assert len(second.handlers) == 1

    def test_level_from_env(self, monkeypatch):
        """测试日志级别来自环境变量"""
        monkeypatch.setenv("DDG_ZEROCLICK_LOG_LEVEL", "debug")
        assert get_logger("ddg_zeroclick.tests.debug").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        """测试未知级别回退为 WARNING"""
        monkeypatch.setenv("DDG_ZEROCLICK_LOG_LEVEL", "chatty")
        assert get_logger("ddg_zeroclick.tests.chatty").level == logging.WARNING
