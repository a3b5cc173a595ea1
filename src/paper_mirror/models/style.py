"""Models for LLM-produced style guides, document context and rewrites."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StyleGuide(CamelModel):
    """Style fingerprint of the sample paper as described by the LLM.

    Numeric ranges are whatever the model reports; they are not checked.
    """

    average_sentence_length: float = 0
    lexical_complexity: float = 0
    passive_voice_percentage: float = 0
    common_transitions: list[str] = Field(default_factory=list)
    tone: str = ""
    structure: str = ""


class SectionSummary(CamelModel):
    section_title: str
    summary: str


class DocumentContext(CamelModel):
    """Whole-draft summary passed along with every chunk."""

    document_summary: str = ""
    section_summaries: list[SectionSummary] = Field(default_factory=list)

    def summary_for(self, section_title: str | None) -> str | None:
        """First section summary whose title contains section_title (case-insensitive)."""
        if not section_title:
            return None
        needle = section_title.lower()
        for section in self.section_summaries:
            if needle in section.section_title.lower():
                return section.summary
        return None


class RewriteVariants(BaseModel):
    """Three rewrites of one chunk, from lightest to heaviest touch."""

    conservative: str
    standard: str
    enhanced: str
