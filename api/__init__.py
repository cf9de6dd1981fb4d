"""Stockmeta REST API package."""
