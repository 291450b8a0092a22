"""Application layer: aggregate storage services and response projections."""
