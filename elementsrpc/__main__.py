"""Entry point for `python -m elementsrpc`."""

from elementsrpc.cli.commands import app

if __name__ == "__main__":
    app()
