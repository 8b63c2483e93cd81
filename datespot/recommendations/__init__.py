"""
Date spot recommendation engine.

Responsibilities:
- Accept user preferences (budget tier, activity style, area, group size).
- Filter the location catalog with the exact -> budget-relaxed -> style-only ladder.
- Order matches by estimated cost and keep the top six.
- Format costs and budget ranges for API serialisation.
"""
