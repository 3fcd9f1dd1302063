"""Reusable patterns shared by the bookstore vertical.

Currently: frozen-dataclass domain configuration.
"""
