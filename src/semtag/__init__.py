"""Semantic-version git tagging."""
