"""Prompt templates for the rewrite backend."""

import json

from paper_mirror.models.style import DocumentContext, StyleGuide

STYLE_GUIDE_SYSTEM = (
    "You are an academic editor specializing in quantitative stylistic analysis. "
    "Analyze the given paper and answer with a single JSON object."
)

DOCUMENT_CONTEXT_SYSTEM = (
    "You summarize academic drafts. Answer with a single JSON object."
)

REWRITE_SYSTEM = (
    "You are an academic writing assistant performing style transfer on one chunk "
    "of a paper. Keep every number, unit, acronym and Markdown heading unchanged. "
    "Answer with a single JSON object."
)

_STYLE_GUIDE_EXAMPLE = {
    "averageSentenceLength": 22.5,
    "lexicalComplexity": 0.78,
    "passiveVoicePercentage": 15.2,
    "commonTransitions": ["此外", "然而", "因此"],
    "tone": "Formal and objective",
    "structure": "Broad context, then hypothesis, results and implications.",
}


def style_guide_prompt(sample_text: str) -> str:
    return (
        "<DOCUMENT_CONTENT>\n"
        f"{sample_text}\n"
        "</DOCUMENT_CONTENT>\n\n"
        "Extract the stylistic features of this paper. Numeric fields must be numbers. "
        "Use exactly the keys of this example:\n"
        f"{json.dumps(_STYLE_GUIDE_EXAMPLE, ensure_ascii=False, indent=2)}"
    )


def document_context_prompt(draft_text: str) -> str:
    return (
        "<DOCUMENT_CONTENT>\n"
        f"{draft_text}\n"
        "</DOCUMENT_CONTENT>\n\n"
        "Summarize the thesis, methodology and conclusion as documentSummary, and give "
        'one entry per section in sectionSummaries as {"sectionTitle", "summary"}.'
    )


def rewrite_chunk_prompt(
    chunk_text: str,
    context_before: str,
    context_after: str,
    style_guide: StyleGuide,
    document_context: DocumentContext,
    section_title: str | None = None,
) -> str:
    section_summary = document_context.summary_for(section_title) or "N/A"
    return (
        "## STYLE GUIDE\n"
        f"{style_guide.model_dump_json(by_alias=True, indent=2)}\n\n"
        "## DOCUMENT SUMMARY\n"
        f"{document_context.document_summary or 'N/A'}\n\n"
        f"## CURRENT SECTION: {section_title or 'N/A'}\n"
        f"{section_summary}\n\n"
        "## CONTEXT BEFORE (do not rewrite)\n"
        f"{context_before or '(start of document)'}\n\n"
        "## TEXT TO REWRITE\n"
        f"{chunk_text}\n\n"
        "## CONTEXT AFTER (do not rewrite)\n"
        f"{context_after or '(end of document)'}\n\n"
        "Rewrite TEXT TO REWRITE in the style of the guide three times and answer with "
        '{"conservative": ..., "standard": ..., "enhanced": ...}: conservative changes '
        "little, standard follows the guide, enhanced restructures more freely."
    )
