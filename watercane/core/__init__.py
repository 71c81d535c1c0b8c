"""Core package — settings, exceptions, response envelopes."""
