"""Periodical Lab: persons, editions, articles and magazines."""

from .report import ReportRenderer
from .sample import build_sample_magazine

__all__ = ["ReportRenderer", "build_sample_magazine"]
