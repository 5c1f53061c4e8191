"""Utility helpers for Weekendly."""
