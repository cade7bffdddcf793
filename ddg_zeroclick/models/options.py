"""
查询选项
每次调用传入一个不可变的选项对象，不存在进程级的默认客户端状态。
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class QueryOptions:
    """
    零点击查询的可选开关，默认全部关闭。
    """
    secure: bool = False          # 使用 https
    no_html: bool = False         # 从文本字段中去除 HTML
    skip_disambig: bool = False   # 跳过消歧义类别
    no_redirect: bool = False     # 不跟随 !bang 跳转
