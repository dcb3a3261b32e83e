"""Ephemeris adapters/providers (optional).

This package provides thin wrappers around external ephemeris libraries,
used only to check the almanac recipe. Install with:
  pip install "sunclock[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "sunclock[ephemeris]"') from e
