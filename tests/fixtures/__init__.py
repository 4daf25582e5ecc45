"""Reusable test fixtures and factory functions."""
