"""Headless pipeline stages for the reading list site."""
