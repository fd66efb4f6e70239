"""Queries - Read operations that fetch data.

Queries NEVER change state.
"""
