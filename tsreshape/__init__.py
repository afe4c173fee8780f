"""
tsreshape: reshaping transforms for monitoring time series.

Series are lists of Point(value, timestamp) samples with millisecond
timestamps. See tsreshape.series for the transforms.
"""

__version__ = "0.1.0"
