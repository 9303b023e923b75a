"""Applications built on the interruptable executor."""
