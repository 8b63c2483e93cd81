"""
Location catalog package.

Responsibilities:
- Read the hand-authored location and area tables shipped under ``datespot/data``.
- Validate every row into a ``LocationRecord`` before anything else sees it.
- Keep the loaded catalog resident and immutable for the life of the process.
"""
