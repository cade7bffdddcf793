"""
零点击 API 响应的数据模型
字段名通过 alias 与上游 JSON 的键名一一对应。
"""
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, ValidationInfo

from ..core.log import get_logger

logger = get_logger(__name__)


class CategoryType(str, Enum):
    """响应类别，对应上游的 Type 字段"""
    ARTICLE = "A"
    DISAMBIGUATION = "D"
    CATEGORY = "C"
    NAME = "N"
    EXCLUSIVE = "E"
    NONE = ""


class _WireModel(BaseModel):
    # 上游会不定期增加字段，未知的键直接忽略
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # 上游的 null 等同于缺省值
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Icon(_WireModel):
    """
    与 FirstURL 关联的图标。
    上游的 Height/Width 有时是数字，有时是空字符串，
    因此先原样保存在 *_raw 中，再由 normalizer 解析为整数。
    """
    url: str = Field(default="", alias="URL")
    height_raw: Any = Field(default="", alias="Height", repr=False)
    width_raw: Any = Field(default="", alias="Width", repr=False)
    height: int = 0  # 像素，未知时为 0
    width: int = 0


class Link(_WireModel):
    """相关主题或外部链接"""
    result: str = Field(default="", alias="Result")  # 指向外部站点的 HTML 链接
    first_url: str = Field(default="", alias="FirstURL")
    icon: Icon = Field(default_factory=Icon, alias="Icon")
    text: str = Field(default="", alias="Text")


class LinkSection(_WireModel):
    """消歧义响应中按含义分组的链接"""
    name: str = Field(default="", alias="Name")
    topics: List[Link] = Field(default_factory=list, alias="Topics")


class Result(_WireModel):
    """
    一次零点击查询的完整结果
    """
    abstract: str = Field(default="", alias="Abstract")  # 主题摘要 (可能包含 HTML)
    abstract_text: str = Field(default="", alias="AbstractText")  # 主题摘要 (纯文本)
    abstract_source: str = Field(default="", alias="AbstractSource")
    abstract_url: str = Field(default="", alias="AbstractURL")
    image: str = Field(default="", alias="Image")
    heading: str = Field(default="", alias="Heading")

    answer: str = Field(default="", alias="Answer")
    # 例如 calc, color, digest, info, ip, iploc, phone, pw, rand, regexp, unicode, upc, zip
    answer_type: str = Field(default="", alias="AnswerType")

    definition: str = Field(default="", alias="Definition")
    definition_source: str = Field(default="", alias="DefinitionSource")
    definition_url: str = Field(default="", alias="DefinitionURL")

    related_topics: List[Link] = Field(default_factory=list, alias="RelatedTopics")
    # 仅在 category 为 Disambiguation 时由 normalizer 填充
    related_topic_sections: List[LinkSection] = Field(default_factory=list)

    results: List[Link] = Field(default_factory=list, alias="Results")

    category: CategoryType = Field(default=CategoryType.NONE, alias="Type")

    redirect: str = Field(default="", alias="Redirect")  # !bang 跳转地址

    @field_validator("category", mode="before")
    @classmethod
    def _tolerate_unknown_category(cls, value: Any) -> Any:
        if isinstance(value, CategoryType):
            return value
        try:
            return CategoryType(value)
        except ValueError:
            logger.warning(f"ZeroClick[Result]: 未知的响应类别 {value!r}，按 None 处理。")
            return CategoryType.NONE


class SectionedTopics(_WireModel):
    """第二轮解码使用的形状：RelatedTopics 被视为分组列表"""
    related_topics: List[LinkSection] = Field(default_factory=list, alias="RelatedTopics")
