"""Subspecifications for superchain chain parameters."""
