"""Shared helpers: logging, exceptions and date parsing."""
