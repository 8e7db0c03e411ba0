"""
Vidshelf - Personal video library browser.

Browses a flat directory of downloaded videos by:
- Grouping files into channels from their ``<channel>__<n><title>`` names
- Searching channels and titles case-insensitively
- Launching an external player
- Marking videos as watched by moving them into ``watched/``
"""

__version__ = "0.1.0"
