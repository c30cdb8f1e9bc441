"""Countdown - days until the events you're looking forward to."""
