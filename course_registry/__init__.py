"""
Course registration backend.

Administrators manage courses; students browse, register and withdraw,
with weekly schedule conflict checks during registration.
"""

__version__ = "0.1.0"
