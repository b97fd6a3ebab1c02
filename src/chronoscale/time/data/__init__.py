"""Data files bundled with :mod:`chronoscale.time`."""
