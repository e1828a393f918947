"""Two-phase execution of compiled anti-pattern queries."""

from .detector import AntiPatternDetector, DetectionResult, has_matches

__all__ = ['AntiPatternDetector', 'DetectionResult', 'has_matches']
