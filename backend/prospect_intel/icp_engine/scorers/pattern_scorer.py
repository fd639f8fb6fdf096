"""
Pattern-table scoring for free text.
"""
from typing import Any, List, Optional
from .base import BaseScorer, clamp


class PatternScorer(BaseScorer):
    """
    Score text against a table of named pattern groups.

    The best (max) weight among matching groups wins; weights never add up.
    
    Config format:
    {
        "entries": [
            {"name": "ceo", "patterns": ["ceo", "chief executive"], "weight": 100},
            {"name": "director", "patterns": ["director", "head of"], "weight": 75}
        ],
        "exclude": ["retired", "former"],   # any hit forces 0
        "default": 70                       # when nothing matches
    }
    """
    
    def _text(self, value: Any) -> str:
        return str(value).lower() if value else ""
    
    def is_excluded(self, value: Any) -> bool:
        text = self._text(value)
        return any(kw in text for kw in self.config.get("exclude", []))
    
    def matches(self, value: Any) -> List[str]:
        """Names of every entry with at least one pattern in the text."""
        text = self._text(value)
        return [
            entry["name"]
            for entry in self.config.get("entries", [])
            if any(p.lower() in text for p in entry["patterns"])
        ]
    
    def best_match(self, value: Any) -> Optional[str]:
        """Name of the highest-weight matching entry (first in table order on ties)."""
        best_name, best_weight = None, -1
        text = self._text(value)
        for entry in self.config.get("entries", []):
            if entry.get("weight", 0) > best_weight and any(p.lower() in text for p in entry["patterns"]):
                best_name, best_weight = entry["name"], entry.get("weight", 0)
        return best_name
    
    def calculate_score(self, value: Any) -> int:
        """
        Scoring logic:
        - 0: text contains an exclude keyword
        - max weight of matching entries
        - default when no entry matches
        """
        if self.is_excluded(value):
            return 0
        
        text = self._text(value)
        weights = [
            entry.get("weight", 0)
            for entry in self.config.get("entries", [])
            if any(p.lower() in text for p in entry["patterns"])
        ]
        
        if not weights:
            return clamp(self.config.get("default", 0))
        
        return clamp(max(weights))
    
    def get_explanation(self, value: Any, score: int) -> str:
        """Explain which entry drove the score."""
        if self.is_excluded(value):
            return "Excluded: text contains a disqualifying keyword"
        
        name = self.best_match(value)
        if name:
            return f"Matched {name}: {score}"
        return f"No pattern matched, default {score}"
