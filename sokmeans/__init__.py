"""Stack Overflow question clustering by dominant programming language."""

__version__ = "0.1.0"
