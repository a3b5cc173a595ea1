"""
Fidelity Guardrails

Make sure rewriting did not silently drop factual tokens: numbers,
measurements and technical acronyms present in the draft should
survive into the rewritten standard version.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
import re

from .metrics import round_half_up
from .rules import AnalysisRules, DEFAULT_RULES
from .text import split_sentences


class AlertType(Enum):
    NUMBER_LOSS = "number_loss"
    ACRONYM_CHANGE = "acronym_change"
    UNIT_LOSS = "unit_loss"


@dataclass(frozen=True)
class FidelityAlert:
    type: AlertType
    sentence_index: int  # -1 when the token cannot be located in the draft
    detail: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "sentenceIndex": self.sentence_index,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class FidelityGuardrails:
    number_retention_rate: float = 100
    acronym_retention_rate: float = 100
    alerts: tuple[FidelityAlert, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "numberRetentionRate": self.number_retention_rate,
            "acronymRetentionRate": self.acronym_retention_rate,
            "alerts": [a.to_dict() for a in self.alerts],
        }


# A number glued to a Latin identifier ("ResNet-50", "VGG16") belongs to the
# acronym check, and matching never starts mid-number.
_NUMBER_GUARD = r"(?<![A-Za-z])(?<![A-Za-z]-)(?<![\d.])"


@lru_cache(maxsize=8)
def _number_pattern(units: tuple[str, ...]) -> re.Pattern:
    # Longest unit first so "ms" is not read as "m"
    unit_alt = "|".join(re.escape(u) for u in sorted(units, key=len, reverse=True))
    alternatives = [
        r"\d+(?:\.\d+)?[%％]",                        # percentages
        r"\d+(?:\.\d+)?[eE][+-]?\d+",                 # scientific notation
        rf"\d+(?:\.\d+)?(?:{unit_alt})(?![A-Za-z])",  # with physical unit
        r"\d+\.\d+",                                  # decimals
        r"\d{2,}",                                    # integers, 2+ digits
    ]
    return re.compile(_NUMBER_GUARD + "(?:" + "|".join(alternatives) + ")", re.IGNORECASE)


@lru_cache(maxsize=8)
def _unit_suffix_pattern(units: tuple[str, ...]) -> re.Pattern:
    unit_alt = "|".join(re.escape(u) for u in sorted(units, key=len, reverse=True))
    return re.compile(rf"^[\d.]+(?:{unit_alt})$", re.IGNORECASE)


# re.ASCII keeps \b between Han characters and Latin letters, so "了ResNet"
# still has a boundary before "R".
ACRONYM_PATTERN = re.compile(
    r"\b(?:"
    r"[A-Z][a-zA-Z]*[A-Z][a-zA-Z]*\d*(?:-[A-Za-z0-9]+)*"  # CamelCase / caps: ResNet-50, IoT, GPT-4
    r"|[A-Z]{2,}\d*"                                    # all caps: CNN, VGG16
    r"|[A-Z][a-z]+(?:-[A-Z0-9][a-zA-Z0-9]*)+"           # word with suffix: Transformer-XL
    r")\b",
    re.ASCII,
)


def _normalize_number(token: str) -> str:
    token = token.lower().replace("％", "%")
    return re.sub(r"\.0+$", "", token)


def _ordered_numbers(text: str, rules: AnalysisRules) -> list[str]:
    seen: dict[str, None] = {}
    for match in _number_pattern(rules.physical_units).finditer(text):
        seen.setdefault(_normalize_number(match.group(0)))
    return list(seen)


def _ordered_acronyms(text: str, rules: AnalysisRules) -> list[str]:
    seen: dict[str, None] = {}
    for match in ACRONYM_PATTERN.finditer(text):
        token = match.group(0)
        # Stoplist applies to the head word, so "This-Is" is dropped like "This"
        if len(token) >= 2 and token.split("-", 1)[0] not in rules.acronym_stoplist:
            seen.setdefault(token)
    return list(seen)


def extract_numbers(text: str, rules: AnalysisRules = DEFAULT_RULES) -> set[str]:
    """
    Extract normalized numeric tokens.

    Covers percentages, scientific notation, numbers with a unit suffix,
    decimals, and integers of two or more digits. Tokens are lower-cased
    and lose a trailing ".0"/".00".
    """
    return set(_ordered_numbers(text, rules))


def extract_acronyms(text: str, rules: AnalysisRules = DEFAULT_RULES) -> set[str]:
    """Extract acronyms and technical names such as CNN, IoT, ResNet-50."""
    return set(_ordered_acronyms(text, rules))


def retention_rate(original: set[str] | list[str], rewritten: set[str]) -> float:
    """Percentage of original items still present; 100 when there was nothing to keep."""
    original = set(original)
    if not original:
        return 100
    retained = sum(1 for item in original if item in rewritten)
    return round_half_up(retained / len(original) * 100)


def find_sentence_index(text: str, token: str) -> int:
    """Index of the first sentence containing token verbatim, or -1."""
    for sentence in split_sentences(text):
        if token in sentence.text:
            return sentence.index
    return -1


def calculate_fidelity_guardrails(
    draft_text: str,
    standard_text: str,
    rules: AnalysisRules = DEFAULT_RULES,
) -> FidelityGuardrails:
    """
    Compare the draft with its rewritten standard version.

    Args:
        draft_text: Original draft
        standard_text: Rewritten standard variant
        rules: Ruleset (units, stoplist, alert caps)

    Returns:
        FidelityGuardrails with retention rates and per-token alerts
        in draft order
    """
    draft_numbers = _ordered_numbers(draft_text, rules)
    standard_numbers = set(_ordered_numbers(standard_text, rules))
    draft_acronyms = _ordered_acronyms(draft_text, rules)
    standard_acronyms = set(_ordered_acronyms(standard_text, rules))

    alerts: list[FidelityAlert] = []
    unit_suffix = _unit_suffix_pattern(rules.physical_units)

    missing_numbers = [n for n in draft_numbers if n not in standard_numbers]
    for number in missing_numbers[: rules.max_alerts_per_kind]:
        if unit_suffix.match(number):
            alert_type, detail = AlertType.UNIT_LOSS, f"missing measurement: {number}"
        else:
            alert_type, detail = AlertType.NUMBER_LOSS, f"missing number: {number}"
        alerts.append(FidelityAlert(alert_type, find_sentence_index(draft_text, number), detail))

    missing_acronyms = [a for a in draft_acronyms if a not in standard_acronyms]
    for acronym in missing_acronyms[: rules.max_alerts_per_kind]:
        alerts.append(FidelityAlert(
            AlertType.ACRONYM_CHANGE,
            find_sentence_index(draft_text, acronym),
            f"missing acronym: {acronym}",
        ))

    return FidelityGuardrails(
        number_retention_rate=retention_rate(draft_numbers, standard_numbers),
        acronym_retention_rate=retention_rate(draft_acronyms, standard_acronyms),
        alerts=tuple(alerts),
    )
