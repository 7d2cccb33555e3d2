"""
Service layer for reading export files.

This package contains the reader that opens a statement file,
parses it line by line and applies the configured error policy.
"""
