"""
jlic — generate a LICENSE.md for the enclosing Rust crate.
"""

__version__ = "0.1.0"
