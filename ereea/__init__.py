"""Robots exploring and harvesting a procedurally generated planet map."""

__version__ = "0.1.0"