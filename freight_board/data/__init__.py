"""
Data layer for the freight board.
"""
