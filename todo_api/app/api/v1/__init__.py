"""
Version 1 of the API.

This subpackage bundles the plain-text to-do endpoints.
"""
