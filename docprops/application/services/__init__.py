"""
Service implementations.
"""
