"""Users app package.

Defines the custom user model with marketplace roles and the ``Speaker``
profile that availability slots, bookings and inquiries hang off. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""
