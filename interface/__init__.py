"""Command-line surface: argument parsing, commands, table/outline rendering."""
