"""proplexengine test suite."""
