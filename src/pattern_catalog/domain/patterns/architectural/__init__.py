"""Architectural patterns - how presentation and navigation are organized."""
