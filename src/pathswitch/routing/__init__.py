"""Routing — template compilation, matching, and the Switch engine.

Templates are compiled once at registration; matching and building are
pure functions over the frozen route list.
"""
