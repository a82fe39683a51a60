"""LMS INTRA meta-repository tooling."""
