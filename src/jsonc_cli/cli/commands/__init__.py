"""jsonc subcommands."""
