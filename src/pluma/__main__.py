"""Allow ``python -m pluma``."""

from pluma.cli import app

if __name__ == "__main__":
    app()
