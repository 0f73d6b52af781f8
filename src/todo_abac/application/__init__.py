"""Application layer – use cases built on the kernel."""
