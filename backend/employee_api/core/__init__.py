"""Core — pure domain types, error hierarchy, and boundary protocols.

Invariants:
    - Core NEVER imports from api/, infrastructure/ or services/
    - No IO in this package
"""
