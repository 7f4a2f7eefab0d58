"""Ports and errors shared across domains."""
