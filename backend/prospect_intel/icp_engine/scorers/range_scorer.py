"""
Band-based scoring for numeric fields.
"""
from typing import Any
from .base import BaseScorer, clamp


class RangeScorer(BaseScorer):
    """
    Score a number by the first band whose upper bound it fits under.
    
    Config format:
    {
        "bands": [
            {"max": 6, "score": 100},
            {"max": 12, "score": 90},
            {"max": 24, "score": 80}
        ],
        "above": 50,     # value beyond the last band
        "unknown": 60    # value missing or not numeric
    }
    """
    
    def calculate_score(self, value: Any) -> int:
        """
        Bands are inclusive and checked in order.
        """
        unknown = self.config.get("unknown", 0)
        
        if value is None:
            return clamp(unknown)
        
        try:
            value = float(value)
        except (ValueError, TypeError):
            return clamp(unknown)
        
        for band in self.config.get("bands", []):
            if value <= band["max"]:
                return clamp(band["score"])
        
        return clamp(self.config.get("above", 0))
    
    def get_explanation(self, value: Any, score: int) -> str:
        """Explain which band the value fell into."""
        if value is None:
            return f"Unknown value, neutral score {score}"
        
        for band in self.config.get("bands", []):
            try:
                if float(value) <= band["max"]:
                    return f"{value} is within {band['max']}: {score}"
            except (ValueError, TypeError):
                break
        return f"{value} is beyond all bands: {score}"
