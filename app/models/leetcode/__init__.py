"""LeetCode domain models."""

from app.models.leetcode.documents import ContestStats, DifficultySplit, LeetCodeProfile, LeetCodeStats

__all__ = [
    "LeetCodeStats",
    "LeetCodeProfile",
    "DifficultySplit",
    "ContestStats",
]
