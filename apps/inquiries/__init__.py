"""Inquiries app package.

Free-form contact requests from organizers (or anonymous visitors) to a
speaker. Inquiries never touch slot state; they are appended, read by the
speaker and acknowledged through a status change.
"""
