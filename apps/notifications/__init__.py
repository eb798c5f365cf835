"""Notifications app package.

Outside collaborator of the scheduling core: subscribes to committed
booking and inquiry events on the message bus and delivers email through
Celery tasks. Delivery failures never reach the command that raised the
event.
"""
