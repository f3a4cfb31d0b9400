"""Validation ports the interaction services use to reach the dog and dogrun catalogs."""
