# cleantext/engine/__init__.py

"""Engine package providing the word matcher and the filter engine.

This package contains the components that scan text for listed words and
substitute the selected placeholder.
"""
