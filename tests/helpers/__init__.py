"""Test helpers for Person Lookup SDK."""
