"""OHSHub wizard and risk-assessment backend."""

__version__ = "1.0.0"
