"""Reservations app package.

Durable bed bookings created from holds (or directly when capacity
allows) and released by site administrators.
"""
