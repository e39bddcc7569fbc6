"""
Core parsing and grid logic.

The parser turns raw text into a padded, rectangular cell list; the table
wraps that list with name lookups, accessors and serialization. Nothing in
this package performs I/O.
"""
