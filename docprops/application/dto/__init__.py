"""
Data transfer objects for presentation layers.
"""
