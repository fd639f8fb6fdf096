"""
Base scorer interface for scoring strategies.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
import math


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3), unlike Python's banker's rounding."""
    # round(value, 9) absorbs float noise such as 83.49999999999999
    return int(math.floor(round(value, 9) + 0.5))


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a score into [low, high]."""
    return max(low, min(high, round_half_up(value)))


class BaseScorer(ABC):
    """Abstract base for all scoring strategies."""
    
    def __init__(self, config: Dict[str, Any]):
        """
        Args:
            config: Scoring rule configuration (tables, bands, defaults, etc.)
        """
        self.config = config
    
    @abstractmethod
    def calculate_score(self, value: Any) -> int:
        """
        Calculate score for given value.
        
        Args:
            value: The text or number to score
            
        Returns:
            Score between 0 and 100
        """
        pass
    
    def get_explanation(self, value: Any, score: int) -> str:
        """
        Return human-readable explanation of score.
        
        Args:
            value: The value that was scored
            score: The calculated score
            
        Returns:
            Explanation string
        """
        return f"Score: {score}"
