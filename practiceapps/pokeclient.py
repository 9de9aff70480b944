"""Fetch a Pokémon's data from a web API and cache it on disk."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import requests

BASE_URL = "https://pokeapi.co/api/"
JSON_SUFFIX = ".json"


@dataclass
class PokemonType:
    """One of a Pokémon's types in its slot."""

    slot: int
    name: str
    url: str


@dataclass
class Stat:
    """A base statistic of a Pokémon."""

    base_stat: int
    effort: int
    name: str
    url: str


class FetchError(Exception):
    """Raised when the API does not answer with status 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to fetch pokemon data: {status_code}")
        self.status_code = status_code


def fetch_pokemon(
    name: str = "pikachu",
    cache_dir="cache",
    base_url: str = BASE_URL,
    session: requests.Session | None = None,
) -> Path:
    """Download the named Pokémon's data and write it to the cache; return the file."""
    url = f"{base_url}v2/pokemon/{name}"
    client = session if session is not None else requests.Session()
    response = client.get(url, timeout=30)
    if response.status_code != 200:
        raise FetchError(response.status_code)

    directory = Path(cache_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}{JSON_SUFFIX}"
    path.write_text(response.text, encoding="utf-8")
    return path


def main(argv=None) -> int:
    """Fetch one Pokémon and report where its data was cached."""
    parser = argparse.ArgumentParser(description="Cache a Pokémon's data locally.")
    parser.add_argument("name", nargs="?", default="pikachu")
    parser.add_argument("--cache-dir", default="cache")
    parser.add_argument("--base-url", default=BASE_URL)
    args = parser.parse_args(argv)

    try:
        path = fetch_pokemon(args.name, args.cache_dir, args.base_url)
    except FetchError as error:
        print(error, file=sys.stderr)
        return 0
    print(f"Pokemon saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())