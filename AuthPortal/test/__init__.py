"""
Tests for AuthPortal.
"""
