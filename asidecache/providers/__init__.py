"""Concrete adapters for the interfaces in :mod:`asidecache.interfaces`."""
