"""
Recommendation layer.

Responsibilities:
- Score dataset rows against a user's answers by exact field overlap.
- Pick the single best-matching row and expose its self-care tip.
- Define the request/response models served by the HTTP API.
"""
