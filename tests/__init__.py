"""
Test suite for KaratCloud core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
