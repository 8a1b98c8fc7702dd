"""Tests for the pattern demonstration modules."""
