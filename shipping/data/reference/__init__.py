"""Shipping reference data: rates and method names."""
