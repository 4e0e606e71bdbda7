"""
NoteKeep Backend - Personal Notes Service

User-scoped note management behind JWT authentication, with an admin
surface for account management.
"""

__version__ = "1.0.0"
