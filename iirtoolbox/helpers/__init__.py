"""
Helpers
-------
Backend functions used by the filter classes.

"""
