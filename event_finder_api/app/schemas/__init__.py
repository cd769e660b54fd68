"""
Pydantic schema definitions for API payloads.

Event schemas describe the reshaped upstream records returned by the
event routes; account schemas describe registration and sign-in
bodies.
"""
