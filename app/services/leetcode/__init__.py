"""LeetCode service."""

from app.services.leetcode.collector import LeetCodeCollector

__all__ = ["LeetCodeCollector"]
