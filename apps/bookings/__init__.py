"""Bookings app package.

Hosts the booking coordinator and the booking ledger. A booking takes
exactly one speaker slot; exclusivity is enforced by a compare-and-swap
on the slot status backed by a partial unique index on active bookings.
"""
