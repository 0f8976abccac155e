"""Hijri Regional Mapping test suite."""
