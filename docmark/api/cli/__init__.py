"""docmark command line interface."""
