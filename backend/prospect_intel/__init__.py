"""Prospect intelligence: ICP scoring and cross-source expertise fusion."""

__version__ = "0.1.0"
