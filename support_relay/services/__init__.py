"""Relay services: persistence, operator messaging and the support domain."""
