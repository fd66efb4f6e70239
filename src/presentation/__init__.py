"""HTTP surface of the kennel API.

Routers translate requests into commands and queries, and handler
results into responses. Resource endpoints under ``routers/api`` are
generated from the route registry; ``routers/system.py`` serves health.
"""
