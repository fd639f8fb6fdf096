"""
Scorer factory and registry.
"""
from .base import BaseScorer, clamp, round_half_up
from .pattern_scorer import PatternScorer
from .range_scorer import RangeScorer
from .threshold_scorer import ThresholdScorer
from .keyword_scorer import KeywordScorer

# Registry of available scorers
SCORER_REGISTRY = {
    "pattern": PatternScorer,
    "range": RangeScorer,
    "threshold": ThresholdScorer,
    "keyword": KeywordScorer,
}


def get_scorer(scorer_type: str, config: dict) -> BaseScorer:
    """
    Factory function to create appropriate scorer.
    
    Args:
        scorer_type: Type of scorer (pattern, range, threshold, keyword)
        config: Scorer configuration
        
    Returns:
        Instantiated scorer
        
    Raises:
        ValueError: If scorer_type not found in registry
    """
    scorer_class = SCORER_REGISTRY.get(scorer_type)
    
    if not scorer_class:
        raise ValueError(
            f"Unknown scorer type: {scorer_type}. "
            f"Available: {list(SCORER_REGISTRY.keys())}"
        )
    
    return scorer_class(config)
