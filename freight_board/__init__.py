"""
Freight board - freight attribute normalization, presentation and fan-out creation.
"""

__version__ = "0.1.0"
