"""
Games Hub Scraper
Searches Steam, Epic, PlayStation, Xbox and Nintendo for a game and merges the results
"""

__version__ = "1.0.0"
