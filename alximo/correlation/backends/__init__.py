"""Correlation backends. Only the CPU reference backend is provided."""

from alximo.correlation.backends.cpu import CPUCorrelationBackend

__all__ = ["CPUCorrelationBackend"]
