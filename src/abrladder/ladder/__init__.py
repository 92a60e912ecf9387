"""Ladder computation: aspect ratio matching, rung arithmetic and formatting."""
