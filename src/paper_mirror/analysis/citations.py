"""
Citation Hints

Flag sentences that make claims usually backed by a reference and
suggest search queries for finding one. No references are generated.
"""

from dataclasses import dataclass, field
import re
from typing import Optional

from .rules import AnalysisRules, CitationReason, DEFAULT_RULES
from .text import split_sentences

QUOTED_PATTERN = re.compile(r"[“\"]([^”\"]+)[”\"]")
ENGLISH_TERM_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*")
LATIN_LETTER = re.compile(r"[A-Za-z]")


@dataclass(frozen=True)
class CitationSuggestion:
    sentence_index: int
    sentence_text: str
    reason: CitationReason
    queries: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "sentenceIndex": self.sentence_index,
            "sentenceText": self.sentence_text,
            "reason": self.reason.value,
            "queries": list(self.queries),
        }


@dataclass(frozen=True)
class CitationReport:
    rules_version: str
    items: tuple[CitationSuggestion, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "rulesVersion": self.rules_version,
            "items": [item.to_dict() for item in self.items],
        }


def _matches_any(sentence: str, patterns: tuple[str, ...]) -> bool:
    return any(re.search(pattern, sentence) for pattern in patterns)


def is_own_work(sentence: str, rules: AnalysisRules = DEFAULT_RULES) -> bool:
    """Check if the sentence describes the author's own contribution."""
    return _matches_any(sentence, rules.own_work_patterns)


def classify_sentence(sentence: str, rules: AnalysisRules = DEFAULT_RULES) -> Optional[CitationReason]:
    """
    Return why the sentence needs a citation, or None.

    Own-work sentences are never flagged. Otherwise categories are tried
    in declaration order and the first with a matching pattern wins.
    """
    if is_own_work(sentence, rules):
        return None

    for reason in CitationReason:
        if _matches_any(sentence, rules.citation_patterns.get(reason, ())):
            return reason

    return None


def extract_key_terms(sentence: str, rules: AnalysisRules = DEFAULT_RULES) -> list[str]:
    """
    Pull search-friendly terms out of a sentence.

    Quoted strings first, then English tokens, then Chinese technical
    terms (2-6 Han characters ending in a technical suffix).
    """
    terms: list[str] = []

    terms.extend(QUOTED_PATTERN.findall(sentence))

    for token in ENGLISH_TERM_PATTERN.findall(sentence):
        if len(token) >= 3 and token.lower() not in rules.english_stopwords:
            terms.append(token)

    suffixes = "|".join(re.escape(s) for s in rules.tech_term_suffixes)
    terms.extend(re.findall(rf"[\u4e00-\u9fa5]{{2,6}}(?:{suffixes})", sentence))

    unique = list(dict.fromkeys(terms))
    return unique[: rules.max_key_terms]


def generate_queries(
    sentence: str,
    reason: CitationReason,
    rules: AnalysisRules = DEFAULT_RULES,
) -> list[str]:
    """Build search queries by pairing key terms with reason-specific suffixes."""
    key_terms = extract_key_terms(sentence, rules)
    cn_suffixes, en_suffixes = rules.query_suffixes[reason]
    queries: list[str] = []

    for term in key_terms[:2]:
        queries.append(f"{term} {cn_suffixes[0]}")

    english_terms = [t for t in key_terms if LATIN_LETTER.search(t)]
    for term in english_terms[:2]:
        queries.append(f"{term} {en_suffixes[0]}")

    if not queries:
        fallback = re.sub(r"[，。？！]", "", sentence[: rules.fallback_query_chars])
        queries.append(f"{fallback} {cn_suffixes[0]}")

    return queries[: rules.max_queries]


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def generate_citation_suggestions(
    draft_text: str,
    rules: AnalysisRules = DEFAULT_RULES,
) -> CitationReport:
    """
    Find draft sentences that probably need a citation.

    Returns:
        CitationReport with at most rules.max_citation_items suggestions,
        in sentence order, tagged with the ruleset version
    """
    items: list[CitationSuggestion] = []

    for sentence in split_sentences(draft_text):
        reason = classify_sentence(sentence.text, rules)
        if reason is None:
            continue

        items.append(CitationSuggestion(
            sentence_index=sentence.index,
            sentence_text=_truncate(sentence.text, rules.display_chars),
            reason=reason,
            queries=tuple(generate_queries(sentence.text, reason, rules)),
        ))
        if len(items) >= rules.max_citation_items:
            break

    return CitationReport(rules_version=rules.version, items=tuple(items))
