"""
Signal extractor for free text.

Finds keyword hits per category and authority signals (stated experience,
measured results, speaking, methodology...) in profile text, posts and
articles. Everything here is pure: the same text always yields the same
extraction, and empty text yields empty collections.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence
import re

from prospect_intel.schemas import Signal, SignalSource, ExpertiseLevel, PostContentType
from prospect_intel.icp_engine.core.keywords import (
    AuthorityRule,
    LINKEDIN_AUTHORITY_RULES,
    WEB_AUTHORITY_RULES,
    TALENT_MANAGEMENT_KEYWORDS,
    PEOPLE_DEVELOPMENT_KEYWORDS,
    HR_TECHNOLOGY_KEYWORDS,
    ROLE_PATTERNS,
    INDUSTRY_PATTERNS,
    COMPANY_SIZE_PATTERNS,
    TRANSITION_PATTERNS,
    RED_FLAG_PATTERNS,
    ORIGINAL_THINKING_PHRASES,
    FRAMEWORKS,
    TOOLS,
)


def _flatten(table: List[dict]) -> List[str]:
    seen: List[str] = []
    for entry in table:
        for pattern in entry["patterns"]:
            if pattern not in seen:
                seen.append(pattern)
    return seen


KEYWORD_CATEGORIES: Dict[str, List[str]] = {
    "talent_management": TALENT_MANAGEMENT_KEYWORDS,
    "people_development": PEOPLE_DEVELOPMENT_KEYWORDS,
    "hr_technology": HR_TECHNOLOGY_KEYWORDS,
    "role_seniority": _flatten(ROLE_PATTERNS),
    "industry": _flatten(INDUSTRY_PATTERNS),
    "company_size": _flatten(COMPANY_SIZE_PATTERNS),
    "career_transition": _flatten(TRANSITION_PATTERNS),
    "red_flag": _flatten(RED_FLAG_PATTERNS),
}

# Context window around a signal match
LINKEDIN_CONTEXT_RADIUS = 50
WEB_CONTEXT_RADIUS = 100

EXPERT_INDICATORS = [
    re.compile(r"framework|methodology", re.IGNORECASE),
    re.compile(r"case study|real example", re.IGNORECASE),
    re.compile(r"\d+%.*improvement", re.IGNORECASE),
    re.compile(r"in my.*years of experience", re.IGNORECASE),
    re.compile(r"companies I.*worked with", re.IGNORECASE),
]

CONTENT_TYPE_RULES = [
    (re.compile(r"case study|real example", re.IGNORECASE), PostContentType.CASE_STUDY),
    (re.compile(r"how to|steps to|guide to", re.IGNORECASE), PostContentType.HOW_TO),
    (re.compile(r"I think|in my opinion|I believe", re.IGNORECASE), PostContentType.OPINION),
    (re.compile(r"check out|great article|interesting read", re.IGNORECASE), PostContentType.NEWS_SHARE),
    (re.compile(r"framework|strategy|approach", re.IGNORECASE), PostContentType.THOUGHT_LEADERSHIP),
]

EXAMPLE_PATTERNS = [
    re.compile(r"for example[^.]{10,100}", re.IGNORECASE),
    re.compile(r"case study[^.]{10,100}", re.IGNORECASE),
    re.compile(r"real example[^.]{10,100}", re.IGNORECASE),
    re.compile(r"at [A-Z][^,]{3,30}"),
]

METRIC_PATTERN = re.compile(
    r"\d+%\s*(?:increase|improvement|reduction|growth|decrease)", re.IGNORECASE
)


@dataclass
class SignalExtraction:
    """Keyword hits per category plus authority signals, in rule order."""
    keyword_hits: Dict[str, List[str]] = field(default_factory=dict)
    authority_signals: List[Signal] = field(default_factory=list)

    def hits(self, category: str) -> List[str]:
        return self.keyword_hits.get(category, [])


def find_keywords(text: str, keywords: Sequence[str]) -> List[str]:
    """Keywords contained in text (case-insensitive), in table order."""
    if not text:
        return []
    lowered = text.lower()
    return [kw for kw in keywords if kw.lower() in lowered]


def extract_context(text: str, start: int, end: int, radius: int, ellipsis: bool = False) -> str:
    snippet = text[max(0, start - radius):min(len(text), end + radius)].strip()
    return f"{snippet}..." if ellipsis else snippet


def extract_authority_signals(
    text: str,
    rules: Sequence[AuthorityRule] = LINKEDIN_AUTHORITY_RULES,
    context_radius: int = LINKEDIN_CONTEXT_RADIUS,
    ellipsis: bool = False,
    source: SignalSource = SignalSource.CONTENT,
) -> List[Signal]:
    """
    Run every rule against the text; each matching rule yields one signal
    for its first match.
    """
    if not text:
        return []

    signals = []
    for rule in rules:
        match = rule.pattern.search(text)
        if not match:
            continue
        signals.append(Signal(
            type=rule.type,
            text=match.group(0),
            confidence=rule.confidence,
            context=extract_context(text, match.start(), match.end(), context_radius, ellipsis),
            label=rule.label,
            source=source,
        ))
    return signals


def extract_web_signals(text: str, source: SignalSource = SignalSource.CONTENT) -> List[Signal]:
    """Authority signals for third-party articles (wider context window)."""
    return extract_authority_signals(
        text, WEB_AUTHORITY_RULES, WEB_CONTEXT_RADIUS, ellipsis=True, source=source
    )


def extract_signals(
    text: str,
    rules: Sequence[AuthorityRule] = LINKEDIN_AUTHORITY_RULES,
    context_radius: int = LINKEDIN_CONTEXT_RADIUS,
) -> SignalExtraction:
    """
    Extract keyword hits and authority signals from text.

    Args:
        text: Free text (headline, about section, post or article body)
        rules: Ordered authority rules to apply
        context_radius: Characters of context kept on each side of a match

    Returns:
        SignalExtraction; categories without hits are omitted
    """
    if not text:
        return SignalExtraction()

    hits = {}
    for category, keywords in KEYWORD_CATEGORIES.items():
        found = find_keywords(text, keywords)
        if found:
            hits[category] = found

    return SignalExtraction(
        keyword_hits=hits,
        authority_signals=extract_authority_signals(text, rules, context_radius),
    )


# ----------------------------------------------------------------------------
# Content helpers
# ----------------------------------------------------------------------------

def detect_original_thinking(text: str) -> bool:
    return bool(find_keywords(text, ORIGINAL_THINKING_PHRASES))


def classify_content(text: str) -> PostContentType:
    """First matching rule wins."""
    for pattern, content_type in CONTENT_TYPE_RULES:
        if text and pattern.search(text):
            return content_type
    return PostContentType.PERSONAL


def extract_frameworks(text: str) -> List[str]:
    return find_keywords(text, FRAMEWORKS)


def extract_tools(text: str) -> List[str]:
    return find_keywords(text, TOOLS)


def extract_metrics(text: str) -> List[str]:
    if not text:
        return []
    return METRIC_PATTERN.findall(text)


def extract_real_examples(text: str) -> List[str]:
    if not text:
        return []
    examples = []
    for pattern in EXAMPLE_PATTERNS:
        match = pattern.search(text)
        if match:
            examples.append(match.group(0).strip())
    return examples


def assess_practical_value(text: str) -> int:
    """25 points each for advice, examples, numbers and named frameworks/tools."""
    if not text:
        return 0

    score = 0
    if re.search(r"how to|steps|tips|advice", text, re.IGNORECASE):
        score += 25
    if re.search(r"example|case study", text, re.IGNORECASE):
        score += 25
    if re.search(r"\d+%", text):
        score += 25
    if extract_frameworks(text) or extract_tools(text):
        score += 25
    return min(100, score)


def assess_expertise_level(text: str) -> ExpertiseLevel:
    if not text:
        return ExpertiseLevel.BEGINNER

    matches = sum(1 for pattern in EXPERT_INDICATORS if pattern.search(text))
    if matches >= 3:
        return ExpertiseLevel.EXPERT
    if matches >= 1:
        return ExpertiseLevel.INTERMEDIATE
    return ExpertiseLevel.BEGINNER
