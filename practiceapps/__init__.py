"""Practice applications: note keeper, task executor, Pokémon cache client and Pokémon HTTP API."""

__version__ = "0.1.0"