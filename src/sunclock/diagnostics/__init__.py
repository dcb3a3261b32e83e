"""Diagnostics package.

- diagnostics: year tables and plots (numpy, matplotlib)
- diagnostics.ephem: optional (requires the ephemeris extra + a JPL kernel)
"""

__all__ = ["year_table", "plot_year"]
