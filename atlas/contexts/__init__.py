"""
Bounded contexts of ATLAS (intake, targeting).
"""
