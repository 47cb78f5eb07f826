"""Command-line interface for elementsrpc."""
