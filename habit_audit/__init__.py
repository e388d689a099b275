"""Habit audit: penalty-based lifestyle scoring with group comparisons.

The scoring core lives in ``habit_audit.services`` and is pure; catalog data
and configuration are loaded once and passed in explicitly.
"""
