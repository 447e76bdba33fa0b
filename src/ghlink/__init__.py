"""ghlink: permanent forge links to files and lines in a git checkout."""

__version__ = "0.1.0"
