"""Magical Miles fare estimation and group cost-sharing service."""

__version__ = "0.1.0"
