"""Line classification and field extraction for circulation exports."""

from discharge.extractors.discharge_extractor import DischargeExtractor, count_characters
from discharge.extractors.rules import LineRule, build_rules

__all__ = [
    "DischargeExtractor",
    "LineRule",
    "build_rules",
    "count_characters",
]
