"""Two-stack integer sorting with a limited instruction set, and an instruction checker."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "cost", "sorting", "cli", "checker"]