"""
File I/O and dataframe conversion for tables.

This is the only place where tables touch the file system or pandas; the
core stays pure.
"""
