"""Holds app package.

A hold is a case worker's short-lived exclusive claim on one bed. This
app owns placement, refresh, release and the periodic expiry sweep.
Admission checks run in a single transaction with the owner and site
rows locked, so a site never hands out more beds than it has.
"""
