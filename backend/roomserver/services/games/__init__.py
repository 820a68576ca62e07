"""Game rules: win detection, move legality and outcome resolution.

Everything here is pure. Room state lives in the session coordinators,
which call into these helpers and decide what to broadcast.
"""
