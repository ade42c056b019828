"""
Configuration loading and validation for settings.

Provides strongly typed settings objects for file paths and cell positions,
loaded from environment variables with upfront validation.
"""
