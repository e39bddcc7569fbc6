"""
Generic utilities shared across modules (logging setup).
"""
