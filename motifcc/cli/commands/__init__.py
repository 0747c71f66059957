"""CLI command modules; each exposes a ``register_*_commands(cli)`` function."""
