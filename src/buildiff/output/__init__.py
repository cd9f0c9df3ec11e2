"""Reporters — rich terminal table and JSON."""
