"""
Threshold-ladder scoring for numeric values.
"""
from typing import Any
from .base import BaseScorer, clamp


class ThresholdScorer(BaseScorer):
    """
    Score by the first rung of a ladder the value clears.
    
    Config format:
    {
        "ladder": [
            {"threshold": 5000, "score": 90},
            {"threshold": 1000, "score": 85}
        ],
        "mode": "above",   # "above" is strict (>), "at_least" is >=
        "default": 50
    }
    """
    
    def _passes(self, value: float, threshold: float) -> bool:
        if self.config.get("mode", "above") == "at_least":
            return value >= threshold
        return value > threshold
    
    def calculate_score(self, value: Any) -> int:
        """
        Return the score of the first passing rung, else the default.
        """
        default = self.config.get("default", 0)
        
        if value is None:
            return clamp(default)
        
        try:
            value = float(value)
        except (ValueError, TypeError):
            return clamp(default)
        
        for rung in self.config.get("ladder", []):
            if self._passes(value, rung["threshold"]):
                return clamp(rung["score"])
        
        return clamp(default)
    
    def get_explanation(self, value: Any, score: int) -> str:
        """Explain threshold result."""
        mode = self.config.get("mode", "above")
        
        for rung in self.config.get("ladder", []):
            if rung["score"] == score:
                return f"Pass: {value} is {mode} {rung['threshold']}"
        return f"Below every threshold: {value}"
