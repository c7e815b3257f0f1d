"""Command-line interface (`fsdlint`)."""
