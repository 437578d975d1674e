"""
Ledger app - shared collection store, atomic units of work and the error
taxonomy used by every other app.
"""
