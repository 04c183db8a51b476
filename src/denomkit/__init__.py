"""
denomkit - Denomination Decomposition and Conversion Engine

Breaks amounts into counts of discrete denominations (notes, coins, or any
ordered set of unit magnitudes) with exact rational arithmetic, and converts
such breakdowns between denomination systems through an exchange factor.
"""

__version__ = "1.0.0"
