"""
Namespace adapters.
"""
