"""
Result models returned by tick planning and axis layout.
"""
