"""
Runner application package.

Contains the configuration schemas and the command-line entrypoint that
runs an anytime algorithm under a deadline.
"""

from .schemas import RunnerConfig, RunConfig, DataConfig, LoggingConfig, OutputConfig

__all__ = ['RunnerConfig', 'RunConfig', 'DataConfig', 'LoggingConfig', 'OutputConfig']
