"""Game domain services: room registry, roster and the session state machine.

This package contains pure domain logic that the Socket.IO handlers and
HTTP routes call into, keeping transport concerns separated from the
rules of the game.
"""
