"""Adapters for host agent frameworks."""
