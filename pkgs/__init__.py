"""
Library packages for the interruptable execution engine.

- interruptable: progress contract, executor and result types
- runtime: step recording for executor runs
- observability: logging setup
"""
