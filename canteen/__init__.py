"""
                College Canteen Ordering System

Roll-number login, menu browsing and order tracking for a college
canteen, served from an in-memory store.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
