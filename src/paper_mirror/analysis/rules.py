"""
Analysis Rules

Closed word lists and pattern tables used by the stylometric engine,
bundled into one immutable value so callers can swap a ruleset without
touching module state.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ConnectorCategory(Enum):
    """Rhetorical relation signalled by a connector word."""
    CAUSAL = "causal"
    ADVERSATIVE = "adversative"
    ADDITIVE = "additive"
    EMPHATIC = "emphatic"


class CitationReason(Enum):
    """Why a sentence probably needs a reference. Declaration order is match order."""
    BACKGROUND = "background"
    DEFINITION = "definition"
    METHOD = "method"
    COMPARISON = "comparison"
    STATISTIC = "statistic"


CONNECTOR_WORDS: Mapping[ConnectorCategory, tuple[str, ...]] = MappingProxyType({
    ConnectorCategory.CAUSAL: (
        "因此", "所以", "由于", "因为", "故", "从而", "以致", "导致", "因而", "于是",
    ),
    ConnectorCategory.ADVERSATIVE: (
        "然而", "但是", "不过", "尽管", "虽然", "却", "但", "可是", "反而", "相反",
    ),
    ConnectorCategory.ADDITIVE: (
        "此外", "另外", "同时", "并且", "而且", "以及", "再者", "还", "也", "又",
    ),
    ConnectorCategory.EMPHATIC: (
        "尤其", "特别", "值得注意的是", "需要指出的是", "显然", "明显", "重要的是", "关键是",
    ),
})

# Boilerplate common in machine-generated academic prose
TEMPLATE_PHRASES: tuple[str, ...] = (
    "本文首先", "本文其次", "本文最后", "本文提出",
    "综上所述", "总而言之", "总的来说",
    "众所周知", "不言而喻", "毋庸置疑",
    "近年来", "随着.*的发展", "受到广泛关注",
    "具有重要意义", "具有重要的理论和实践价值",
    "研究表明", "结果表明", "实验表明",
    "进行了.*研究", "开展了.*工作",
)

CITATION_PATTERNS: Mapping[CitationReason, tuple[str, ...]] = MappingProxyType({
    CitationReason.BACKGROUND: (
        "近年来", "广泛关注", "已被广泛应用", "已有研究表明", "文献报道",
        "研究发现", "前人研究", "现有研究", "大量研究", "学者们",
        "随着.*的发展", "日益增长", "已成为", "普遍认为", "通常认为",
    ),
    CitationReason.DEFINITION: (
        "定义为", "被定义为", r"根据.*标准", r"按照.*定义", r"指标.*定义",
        "协议", "规范", "标准规定", "国际标准", "国家标准", "行业标准",
    ),
    CitationReason.METHOD: (
        r"采用.*方法", r"基于.*模型", r"使用.*算法", r"运用.*技术", r"借鉴.*框架",
        r"参考.*设计", r"引入.*机制", r"提出的.*方法", r"经典.*算法", r"传统.*方法",
    ),
    CitationReason.COMPARISON: (
        r"传统方法.*存在", r"现有方法.*不足", "相比之下", "优于", "劣于",
        "对比", "比较", "相较于", r"与.*相比", "超过了", "不如",
    ),
    CitationReason.STATISTIC: (
        r"占.*比例", "增长了", "下降了", "大规模", "调查显示",
        "统计表明", "数据显示", "据统计", r"\d+%.*的", r"约\d+", r"超过\d+", r"达到\d+",
    ),
})

# Self-referential claims; these never need a citation
OWN_WORK_PATTERNS: tuple[str, ...] = (
    "本文提出", "本研究", "我们提出", "我们发现", "本工作",
    "本实验", "本文设计", "本文实现", "我们的方法", "我们的模型",
)

TECH_TERM_SUFFIXES: tuple[str, ...] = (
    "技术", "方法", "算法", "模型", "系统", "网络", "框架", "机制", "理论", "分析",
)

# (chinese suffixes, english suffixes); the first of each is used for queries
QUERY_SUFFIXES: Mapping[CitationReason, tuple[tuple[str, ...], tuple[str, ...]]] = MappingProxyType({
    CitationReason.BACKGROUND: (("综述", "研究进展", "发展现状"), ("survey", "review", "overview")),
    CitationReason.DEFINITION: (("定义", "标准", "规范"), ("definition", "standard", "specification")),
    CitationReason.METHOD: (("方法", "算法", "技术"), ("method", "algorithm", "technique")),
    CitationReason.COMPARISON: (("对比", "比较研究", "评估"), ("comparison", "benchmark", "evaluation")),
    CitationReason.STATISTIC: (("统计", "调查", "数据分析"), ("statistics", "survey data", "analysis")),
})

ENGLISH_STOPWORDS: frozenset[str] = frozenset({
    "the", "and", "for", "with", "from", "this", "that", "these", "those",
    "are", "was", "were", "been", "have", "has", "had",
})

# Capitalized words that look like names but carry no technical content
ACRONYM_STOPLIST: frozenset[str] = frozenset({
    "The", "This", "That", "These", "Those", "With", "From", "Into", "Upon",
})

PHYSICAL_UNITS: tuple[str, ...] = (
    "mm", "cm", "m", "km", "mg", "g", "kg", "ml", "L", "℃", "°C",
    "Hz", "kHz", "MHz", "GHz", "ms", "s", "min", "h",
)


@dataclass(frozen=True)
class AnalysisRules:
    """Word lists, pattern tables and thresholds for one heuristic ruleset."""

    version: str = "1.0.0"

    connector_words: Mapping[ConnectorCategory, tuple[str, ...]] = field(
        default_factory=lambda: CONNECTOR_WORDS
    )
    template_phrases: tuple[str, ...] = TEMPLATE_PHRASES

    citation_patterns: Mapping[CitationReason, tuple[str, ...]] = field(
        default_factory=lambda: CITATION_PATTERNS
    )
    own_work_patterns: tuple[str, ...] = OWN_WORK_PATTERNS
    tech_term_suffixes: tuple[str, ...] = TECH_TERM_SUFFIXES
    query_suffixes: Mapping[CitationReason, tuple[tuple[str, ...], tuple[str, ...]]] = field(
        default_factory=lambda: QUERY_SUFFIXES
    )
    english_stopwords: frozenset[str] = ENGLISH_STOPWORDS

    acronym_stoplist: frozenset[str] = ACRONYM_STOPLIST
    physical_units: tuple[str, ...] = PHYSICAL_UNITS

    long_sentence_chars: int = 50
    max_alerts_per_kind: int = 5
    max_key_terms: int = 4
    max_queries: int = 4
    max_citation_items: int = 20
    display_chars: int = 100
    fallback_query_chars: int = 20


DEFAULT_RULES = AnalysisRules()
