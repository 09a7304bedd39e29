"""Plain domain objects shared by the repository and service layers."""
