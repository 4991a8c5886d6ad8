"""Utility helpers for cascader."""
