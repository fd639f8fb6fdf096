"""
Keyword-count scoring for free text.
"""
from typing import Any
import re
from .base import BaseScorer, clamp
from .threshold_scorer import ThresholdScorer


class KeywordScorer(BaseScorer):
    """
    Score text by how many keywords it contains.
    
    Config format:
    {
        "keywords": ["coaching", "mentoring"],
        "points": 10,                 # per matched keyword
        "count_occurrences": false,   # true counts every occurrence, not presence
        "ladder": [                   # optional: map the count to a score instead
            {"threshold": 4, "score": 100},
            {"threshold": 3, "score": 85}
        ],
        "default": 30                 # ladder default (count below every rung)
    }
    """
    
    def count_matches(self, value: Any) -> int:
        if not value:
            return 0
        
        text = str(value).lower()
        keywords = [k.lower() for k in self.config.get("keywords", [])]
        
        if self.config.get("count_occurrences", False):
            return sum(len(re.findall(re.escape(kw), text)) for kw in keywords)
        
        return sum(1 for kw in keywords if kw in text)
    
    def calculate_score(self, value: Any) -> int:
        """
        Points per match (clamped), or a ladder lookup when one is configured.
        """
        count = self.count_matches(value)
        
        if "ladder" in self.config:
            ladder = ThresholdScorer({
                "ladder": self.config["ladder"],
                "mode": "at_least",
                "default": self.config.get("default", 0),
            })
            return ladder.calculate_score(count)
        
        return clamp(count * self.config.get("points", 10))
    
    def get_explanation(self, value: Any, score: int) -> str:
        """Explain keyword matches."""
        count = self.count_matches(value)
        
        if count == 0:
            return "No keywords found"
        return f"{count} keyword match(es): {score}"
