"""Console input/output for the route optimizer."""
