"""Session coordinators: one per game, mutating rooms in response to events.

Coordinators raise RoomFull and InvalidAction; they never talk to Flask
directly and only reach clients through the injected Transport.
"""
