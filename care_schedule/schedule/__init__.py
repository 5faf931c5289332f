"""Schedule module - treatment rule engine and reminder lookahead.

This module provides:
- Immutable schedule models (entries, day schedule, schedule window)
- The weekday-driven rule engine (rules.py)
- Upcoming special-event reminder lookup (reminder.py)
- Clock-driven reminder refresh (ticker.py)
"""
