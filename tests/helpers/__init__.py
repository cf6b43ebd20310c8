"""Shared test utilities (no tests here)."""
