"""
bufc Command-Line Interface
===========================

- **bufc**: compile a program to C or to a native executable

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["bufc"]
