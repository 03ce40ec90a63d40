"""
StockDash Backend

Technical indicators and market data for the stock-analytics dashboard.
"""

__version__ = "0.1.0"
