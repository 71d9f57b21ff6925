"""Utility helpers package for file and payload I/O."""
