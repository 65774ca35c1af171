"""
Regression backends.

Available backends:
    CPUSumsBackend: Closed-form OLS from accumulated sums
"""

from pylinreg.regression.backends.cpu import CPUSumsBackend

__all__ = [
    "CPUSumsBackend",
]
