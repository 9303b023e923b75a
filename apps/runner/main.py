#!/usr/bin/env python3
"""
Command-line entrypoint for running an anytime algorithm under a deadline.

Loads configuration, builds the selected computation, runs it through the
executor and prints either the finished output or how late the run was
together with the partial result.
"""
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import numpy as np
import yaml
from pydantic import ValidationError

from algorithms import ArgmaxSearch, NewtonSqrt, SelectionSort, sorted_prefix_length
from apps.runner.schemas import RunnerConfig
from pkgs.interruptable import ExecutionResult, exec_interruptable
from pkgs.observability import setup_logging
from pkgs.runtime import StepRecorder

logger = logging.getLogger(__name__)


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load raw configuration from YAML.

    A missing or unparsable file falls back to an empty mapping; a file
    that parses to something other than a mapping raises ValueError.
    """
    if not path:
        return {}
    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load config from {path}: {e}")
        return {}
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f"config {path} must be a mapping, got {type(config).__name__}")
    logger.info(f"Loaded configuration from {path}")
    return config


def apply_overrides(raw: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Merge command-line flags over the YAML sections.

    Raises ValueError when a section is present but is not a mapping.
    """
    merged = {}
    for section in ('run', 'data', 'logging', 'output'):
        value = raw.get(section)
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise ValueError(f"config section '{section}' must be a mapping, got {type(value).__name__}")
        merged[section] = dict(value)

    if args.algorithm is not None:
        merged['run']['algorithm'] = args.algorithm
    if args.deadline_ms is not None:
        merged['run']['deadline_ms'] = args.deadline_ms
    if args.record:
        merged['run']['record'] = True
    if args.size is not None:
        merged['data']['size'] = args.size
    if args.seed is not None:
        merged['data']['seed'] = args.seed
    if args.verbose:
        merged['logging']['level'] = 'DEBUG'

    return merged


class AnytimeRunner:
    """Builds one computation from config and runs it under the deadline."""

    def __init__(self, config: RunnerConfig):
        self.config = config
        self.recorder: Optional[StepRecorder] = None
        if config.run.record:
            self.recorder = StepRecorder(enabled=True)
            self.recorder.set_metadata(
                algorithm=config.run.algorithm,
                deadline=config.run.deadline_ms / 1000.0
            )

    def generate_data(self) -> List[int]:
        data_cfg = self.config.data
        rng = np.random.default_rng(data_cfg.seed)
        return rng.integers(data_cfg.low, data_cfg.high, size=data_cfg.size).tolist()

    def build(self):
        """Create the computation selected by ``run.algorithm``."""
        algorithm = self.config.run.algorithm
        data_cfg = self.config.data
        if algorithm == 'sort':
            data = self.generate_data()
            self._show("Input", data)
            return SelectionSort(data)
        if algorithm == 'sqrt':
            self._show("Input", data_cfg.value)
            return NewtonSqrt(data_cfg.value)
        rng = np.random.default_rng(data_cfg.seed)
        scores = rng.random(data_cfg.size)
        self._show("Input", f"{scores.size} scores")
        return ArgmaxSearch(scores, chunk_size=data_cfg.chunk_size)

    def _show(self, label: str, value):
        if self.config.output.show_data:
            print(f"{label}: {value}")

    def run(self) -> ExecutionResult:
        func = self.build()
        deadline = self.config.run.deadline_ms / 1000.0
        logger.info(f"Running {self.config.run.algorithm} with a {self.config.run.deadline_ms}ms deadline")

        result = exec_interruptable(func, deadline, recorder=self.recorder)
        self.report(result)

        if self.recorder is not None:
            self._save_recordings()
        return result

    def report(self, result: ExecutionResult):
        """Print the output, or the overrun and partial result."""
        if result.success:
            self._show("Result", result.output)
            print(f"Completed in {result.steps} steps ({result.elapsed * 1000:.3f}ms)")
            return

        timeout = result.timeout
        print(f"Deadline missed by {timeout.late_by * 1000:.3f}ms after {result.steps} steps")
        partial = timeout.partial_result()
        if partial is None:
            print("No partial result available")
            return
        self._show("Partial result", partial)
        if self.config.run.algorithm == 'sort':
            print(f"The first {sorted_prefix_length(partial)} items were sorted")

    def _save_recordings(self):
        path = self.config.output.recordings_path
        written = self.recorder.dump_all_formats(path)
        summary = self.recorder.get_summary()
        logger.info(f"Recorded {summary['row_count']} steps to {', '.join(written)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run an anytime algorithm under a deadline')
    parser.add_argument(
        '--config', '-c',
        default='configs/default.yaml',
        help='Path to configuration file (default: configs/default.yaml)'
    )
    parser.add_argument('--algorithm', '-a', choices=['sort', 'sqrt', 'argmax'], default=None)
    parser.add_argument('--deadline-ms', '-d', type=float, default=None,
                        help='Deadline in milliseconds')
    parser.add_argument('--size', '-n', type=int, default=None, help='Input size')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for generated input')
    parser.add_argument('--record', action='store_true', help='Record every step and dump the trace')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # provisional setup so config loading is logged; replaced once config is known
    setup_logging("DEBUG" if args.verbose else "INFO")

    try:
        raw = apply_overrides(load_config(args.config), args)
        config = RunnerConfig.model_validate(raw)
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(config.logging.level, config.logging.format)

    try:
        AnytimeRunner(config).run()
        return 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Run failed: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
