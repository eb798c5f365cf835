"""Availability app package.

Owns a speaker's bookable time slots: the slot store used by speakers to
publish and withdraw slots, and the read-only projection that calendar
views use to decide which days and times can be offered to organizers.
Slots leave the ``available`` status only through the booking coordinator.
"""
