"""
Utility functions module.

Calendar arithmetic shared by tick planning, evening and label formatting.

Time Semantics:
- An instant is an integer count of milliseconds since the Unix epoch (UTC)
- Calendar fields (year, month, day, time of day) are always read in the
  axis timezone, never in the process-local timezone
- Year, month, week and day steps move the wall clock; hour and finer steps
  move absolute time
"""
