# handycmd/__main__.py
"""
Entry point for handycmd.
"""
from handycmd.cli import app

if __name__ == "__main__":
    app()
