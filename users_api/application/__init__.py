"""Application layer: configuration, profile handler and Lambda entry point."""
