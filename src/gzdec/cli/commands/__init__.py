"""gzdec subcommands."""
