"""Entry point for running suitcase as a module.

This allows running the application with:
    python -m suitcase [OPTIONS] COMMAND [ARGS]...
"""

from suitcase.cli import app

if __name__ == "__main__":
    app()
