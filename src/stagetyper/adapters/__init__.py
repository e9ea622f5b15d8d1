"""Adapters connecting the stage-type engine to files and HTTP services."""
