"""
Interview preparation API.

Generates interview question sets with Gemini, persists them per user
session, and exposes pin/note/explain operations over HTTP.
"""

__version__ = "0.1.0"
