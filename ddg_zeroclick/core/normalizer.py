"""
ddg_zeroclick - 响应规范化
把上游返回的原始字节解码为 Result，并修正类型不固定的字段：

1.  **解码**: 按字段别名解码，Icon 的 Height/Width 先以原始值保存。
2.  **数值修正**: 数字截断为整数，空字符串或其他非数字值记为 0。
3.  **消歧义修正**: 仅当类别为 Disambiguation 时，剔除 RelatedTopics 中
    由分组标题解码出的空链接，并对同一份字节做第二次解码得到分组列表。
"""
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from ..models.response import CategoryType, Icon, Link, Result, SectionedTopics
from .exceptions import DecodeError
from .log import get_logger

logger = get_logger(__name__)


def _to_int(raw: Any) -> int:
    """数字截断为 int，其余一律为 0。bool 在 JSON 中不是数字。"""
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return 0
    try:
        return int(raw)
    except (OverflowError, ValueError):
        # inf / nan
        return 0


def fix_icon(icon: Icon) -> None:
    """根据原始值设置 icon 的整数宽高"""
    icon.height = _to_int(icon.height_raw)
    icon.width = _to_int(icon.width_raw)


def _fix_link_icons(links: Iterable[Link]) -> None:
    for link in links:
        fix_icon(link.icon)


def _decode_sections(raw: Union[bytes, str]) -> list:
    """
    (内部方法) 将 RelatedTopics 按分组形状重新解码。
    失败时返回空列表，主结果不受影响。
    """
    try:
        sectioned = SectionedTopics.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"ZeroClick[Normalizer]: 消歧义分组的二次解码失败，分组置空: {e}")
        return []
    return [section for section in sectioned.related_topics if section.name]


def normalize(result: Result, raw: Optional[Union[bytes, str]] = None) -> Result:
    """
    就地修正一个已解码的 Result，并返回它本身。

    重复调用不会改变 Icon 的整数字段，也不会再删除 related_topics 中的条目。
    只有提供 raw 且其中含有具名分组时才会替换已有的 related_topic_sections，
    因此把输出按别名导出后再解析，分组也不会丢失。

    :param result: 第一轮解码得到的结果
    :param raw: 原始响应，用于消歧义分组的二次解码
    :return: 修正后的 result
    """
    _fix_link_icons(result.results)
    _fix_link_icons(result.related_topics)

    if result.category != CategoryType.DISAMBIGUATION:
        result.related_topic_sections = []
        return result

    # 分组标题被当作 Link 解码时所有字段均为空
    result.related_topics = [link for link in result.related_topics if link.result]

    if raw is not None:
        sections = _decode_sections(raw)
        if sections:
            result.related_topic_sections = sections
    result.related_topic_sections = [section for section in result.related_topic_sections if section.name]
    for section in result.related_topic_sections:
        _fix_link_icons(section.topics)

    return result


def parse_response(raw: bytes) -> Result:
    """
    解码并规范化一次零点击查询的响应体。

    :param raw: 响应体字节，空响应视为空结果
    :return: 规范化后的 Result
    :raises DecodeError: 响应体不是合法的 JSON 对象
    """
    # 非法 UTF-8 字节替换为 U+FFFD
    text = raw.decode("utf-8", errors="replace")
    if not text.strip():
        logger.debug("ZeroClick[Normalizer]: 响应体为空，返回空结果。")
        return Result()

    try:
        result = Result.model_validate_json(text)
    except ValidationError as e:
        logger.debug(f"ZeroClick[Normalizer]: 解码响应失败: {e}")
        raise DecodeError(f"无法解码零点击响应: {e}") from e

    return normalize(result, text)
