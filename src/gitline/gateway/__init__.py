"""Gateways to external processes used by gitline."""
