"""Bundled resources for packscan."""
