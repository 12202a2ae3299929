"""Inspection CLI."""
