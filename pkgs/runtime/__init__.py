"""
Runtime support for executor runs.

This package holds the recording side of a run, kept apart from the
executor so that the core loop has no output formats to know about.
"""

from .recorder import StepRecorder

__all__ = ['StepRecorder']
