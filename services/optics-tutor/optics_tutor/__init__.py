"""Bright-field vs dark-field optics tutor backed by Gemini."""
