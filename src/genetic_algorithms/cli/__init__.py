"""Command-line interface for the genetic algorithms framework."""
