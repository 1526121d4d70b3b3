"""
Collaborator interfaces.
"""
