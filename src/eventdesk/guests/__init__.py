"""Guests invited to an event and their RSVP state."""
