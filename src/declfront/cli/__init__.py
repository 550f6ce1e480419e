"""
declfront Command-Line Interface
================================

- **declc**: parse one declaration and print its AST

Implemented as a Click application with help and error reporting.
"""

__all__ = ["declc"]
