"""
Lifepath - Turn-based life simulation engine

A deterministic, seed-reproducible engine for a medieval life story told
through narrative choices. The package provides:
- Scene deck building and gated scene selection
- Choice resolution with upkeep, hunger, fatigue and luck drift
- Ending classification
- Scripted strategies and a Monte-Carlo balance simulator
- An in-memory session layer with an HTTP API
"""

__version__ = "0.1.0"
