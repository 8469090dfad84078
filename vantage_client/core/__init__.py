"""Logging and tracing setup shared by the client and its CLI."""
