"""Application layer: the study store and the services built on it."""
