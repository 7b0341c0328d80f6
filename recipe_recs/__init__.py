"""
Recipe recommendation engine.

Builds a weighted preference profile from a user's liked, favorited and tried
recipes, and ranks candidate recipes against it.
"""
