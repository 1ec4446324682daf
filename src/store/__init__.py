"""In-memory dataset layer.

This package owns the loaded job dataset and its lookup scans.
It serves independent record copies to every caller.
"""
