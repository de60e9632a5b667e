"""Sites app package.

Shelter locations and their capacity ledger (beds per bed type).
"""
