"""Diagnostics package.

- pretty_month, new_years_table, round_trip: always available
- leap_months: requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months"]
