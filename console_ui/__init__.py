"""Console front end for the twenty-one engine."""
