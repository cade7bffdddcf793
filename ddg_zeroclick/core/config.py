"""
客户端配置
配置以普通 dict 传入，缺省项使用 DEFAULT_CONFIG 中的值。
"""
from typing import Any, Dict, Optional

from .exceptions import ConfigError

VERSION = "0.1.0"

API_HOST = "api.duckduckgo.com"
USER_AGENT = f"ddg-zeroclick/{VERSION}"

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "http": {
        "timeout_seconds": 10,
        "api_host": API_HOST,
        "user_agent": USER_AGENT,
    }
}


def load_config(config: Optional[Dict] = None) -> Dict[str, Dict[str, Any]]:
    """
    将用户配置与默认配置合并并校验。

    :param config: 用户配置字典，可以为 None
    :return: 合并后的新字典，不修改传入的对象
    :raises ConfigError: 配置不是字典、超时时间不是正数，或 api_host/user_agent 为空
    """
    config = config or {}
    if not isinstance(config, dict):
        raise ConfigError(f"配置必须是字典，当前值: {config!r}")
    user_http = config.get("http") or {}
    if not isinstance(user_http, dict):
        raise ConfigError(f"http 配置必须是字典，当前值: {user_http!r}")

    http_config = dict(DEFAULT_CONFIG["http"])
    http_config.update(user_http)

    timeout = http_config["timeout_seconds"]
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"http.timeout_seconds 必须是正数，当前值: {timeout!r}")

    for key in ("api_host", "user_agent"):
        value = http_config[key]
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"http.{key} 不能为空，当前值: {value!r}")

    return {"http": http_config}
