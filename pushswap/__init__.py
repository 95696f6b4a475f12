"""Sort integers on two stacks with a small instruction set."""

__version__ = "1.0.0"