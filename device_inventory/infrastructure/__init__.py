"""
Infrastructure Layer
====================

Concrete implementations of the domain repository interfaces.
"""
