"""Shared helpers used by the cfbuild wrapper."""
