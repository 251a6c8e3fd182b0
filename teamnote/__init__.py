"""Competitive-programming algorithms: strings, polynomials, flows, matching and DP optimisations."""

__version__ = "0.1.0"