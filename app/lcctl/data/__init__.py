"""Bundled data files for lcctl."""
