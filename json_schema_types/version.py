"""
Version information for the JSON Schema type transformer.
"""

__version__ = "1.0.0"
