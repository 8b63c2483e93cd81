"""
Date spot recommendation service.

Picks a short list of places to go on a date in Enugu from a budget tier,
an activity style and a preferred area, and keeps each signed-in user's
favorites, reviews, recent searches and settings.
"""
