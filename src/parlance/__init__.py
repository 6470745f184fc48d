"""Parlance - content reconciliation and translation readiness for multi-locale documents."""

__version__ = "0.1.0"
