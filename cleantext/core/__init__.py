# cleantext/core/__init__.py

"""Core domain models and utilities used across the filtering system.

This package provides domain types, exceptions, and the word list loader
shared by the rest of the application.
"""
