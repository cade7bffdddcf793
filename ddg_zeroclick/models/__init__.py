"""
ddg_zeroclick - 数据模型包
"""

# 从子模块导入所有模型
from .options import QueryOptions
from .response import CategoryType, Icon, Link, LinkSection, Result, SectionedTopics

__all__ = [
    "QueryOptions",
    "CategoryType",
    "Icon",
    "Link",
    "LinkSection",
    "Result",
    "SectionedTopics"
]
