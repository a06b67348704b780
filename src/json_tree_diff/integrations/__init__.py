"""Integrations subpackage for json-tree-diff.

Contains the pytest plugin, auto-discovered via the pytest11 entry point.
"""
