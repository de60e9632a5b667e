"""Users app package.

Holds the custom user model (case workers and site admins) and the
lookup of the acting user used by hold and reservation commands.
"""
