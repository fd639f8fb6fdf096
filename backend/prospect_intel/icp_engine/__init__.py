"""
ICP scoring and intelligence fusion engine.

Pipeline: records → map → extract signals → score → fuse → batch
"""
