"""
Shared Kernel

Base classes and utilities shared by the availability, bookings and inquiries
contexts: domain building blocks, the error taxonomy, the unit of work and the
message bus that delivers domain events after commit.
"""
