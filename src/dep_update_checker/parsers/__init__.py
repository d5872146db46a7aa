"""Manifest parsing and version comparison."""
