"""Preparation tasks attached to an event."""
