"""Enumerations for question types and risk severity."""

from enum import Enum


class QuestionType(str, Enum):
    """Answer type of a wizard question."""

    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    FREE_TEXT = "free_text"

    @property
    def is_choice(self) -> bool:
        return self is not QuestionType.FREE_TEXT


class RiskLevel(str, Enum):
    """Risk severity with a total order.

    Order (lowest to highest):
    1. UNKNOWN (default, no assessable finding)
    2. LOW
    3. MEDIUM
    4. HIGH
    5. CRITICAL
    """

    UNKNOWN = "unknown"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def get_severity_rank(cls, level: "RiskLevel") -> int:
        """Get numeric severity rank for level comparison.

        Args:
            level: RiskLevel to get rank for

        Returns:
            Integer rank (higher = more severe)
        """
        ranks = {
            cls.UNKNOWN: 0,
            cls.LOW: 1,
            cls.MEDIUM: 2,
            cls.HIGH: 3,
            cls.CRITICAL: 4,
        }
        return ranks.get(level, 0)

    def outranks(self, other: "RiskLevel") -> bool:
        """Check if this level is strictly more severe than another."""
        return self.get_severity_rank(self) > self.get_severity_rank(other)
