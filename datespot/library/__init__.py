"""
Per-user library: favorite places, reviews, recent searches and settings.

Everything is held in process memory and keyed by the signed-in user's email.
"""
