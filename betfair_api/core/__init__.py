"""
Core helpers package for the Betfair client.

Configuration, the exception hierarchy, deadlines, the retry policy,
TLS setup, header construction and the parameter builder.  None of
these modules perform network I/O themselves.
"""

__all__ = []
