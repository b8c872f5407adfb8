"""Command line interface for clusternames."""
