"""Retroactive analysis engine.

Pure functions only: projector -> comparator -> metrics, orchestrated by
analyzer.
"""
