"""LeetCode API client."""

from stats_client.leetcode.client import LeetCodeClient

__all__ = ["LeetCodeClient"]
