"""Application layer: service orchestration over core and boundary."""
