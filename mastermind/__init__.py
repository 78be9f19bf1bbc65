"""
Mastermind game engine: secret generation, scoring, result classes and the
session state machine, plus a small in-memory FastAPI host.
"""
