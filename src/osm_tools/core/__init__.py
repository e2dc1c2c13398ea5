"""Upstream adapters, shared HTTP client, and throttle gate."""
