"""
Vacation tracker: vacation requests against an annual allotment of working days.
"""

__version__ = "0.1.0"
