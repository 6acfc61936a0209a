"""
Test suite for mooreslaw

Contains:
- tests/unit/          : Unit tests for individual modules
"""
