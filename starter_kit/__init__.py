"""Starter Kit -- scaffold web3 projects from contract and frontend templates."""

__version__ = "0.1.0"
