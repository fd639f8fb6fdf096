"""Core scoring, analysis and fusion components."""
