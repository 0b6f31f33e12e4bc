"""Built-in token sources.

This package provides ready-made sources for environment variables,
command-line flags, HTTP headers, plain mappings and YAML documents.
Each one pairs a tag key with a resolver returning raw string tokens.
"""
