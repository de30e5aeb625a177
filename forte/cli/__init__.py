"""Forte command-line interface."""
