"""Click commands for the faunaset CLI."""
