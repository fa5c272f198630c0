"""Standings engine for multi-day show jumping competitions."""
