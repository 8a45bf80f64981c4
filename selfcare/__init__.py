"""
Self-care tip recommendation service.

Serves a categorical questionnaire derived from a static CSV dataset and
returns the self-care tip whose answers best overlap the user's.
"""
