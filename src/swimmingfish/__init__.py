"""Procedurally animated swimming fish drawn from parametric geometry."""
__version__ = "0.1.0"
