"""Loans Manager - REST API for loans between users."""

__version__ = "1.0.0"
