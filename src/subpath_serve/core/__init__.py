"""Filesystem traversal, suffix resolution and page rendering."""
