"""Clients for the risk data APIs."""
