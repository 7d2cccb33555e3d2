"""
Core modules for reading ABN AMRO tab-delimited exports.

This package contains:
- config: Application configuration and settings
- exceptions: Custom exception classes and error codes
- exporters: DataFrame and Excel export
- logger: Logging configuration
- normalize: Date and decimal field decoders
- parsing: Line parser
- schema: Pydantic models for parsed transfers
"""
