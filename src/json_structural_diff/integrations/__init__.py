"""Integrations subpackage for json-structural-diff.

Contains the pytest plugin, auto-discovered via the pytest11 entry point.
"""
