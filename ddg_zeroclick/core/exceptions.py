"""
ddg_zeroclick - 自定义异常类
"""

class ZeroClickError(Exception):
    """库的基础异常类"""
    pass

class RequestConstructionError(ZeroClickError):
    """构造请求 URL 失败，正常使用下不应出现"""
    pass

class TransportError(ZeroClickError):
    """网络、DNS 或 TLS 层面的失败，原始 httpx 异常保存在 __cause__ 中"""
    pass

class DecodeError(ZeroClickError):
    """响应体不是合法的 JSON 对象"""
    pass

class ConfigError(ZeroClickError):
    """配置相关错误"""
    pass
