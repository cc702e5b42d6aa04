"""PokeAPI client and random creature selection."""

from __future__ import annotations

import json
import os
import random
import ssl
import urllib.error
import urllib.request
from typing import Any

import certifi

from .models import Pokemon, Selection


DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
USER_AGENT = "pokefetch/0.1"


class PokeApiError(RuntimeError):
    pass


def _build_ssl_context() -> ssl.SSLContext:
    ca_bundle = os.environ.get("POKEFETCH_CA_BUNDLE", "").strip()
    if ca_bundle:
        return ssl.create_default_context(cafile=ca_bundle)

    return ssl.create_default_context(cafile=certifi.where())


def extract_types(payload: dict[str, Any]) -> list[str]:
    out: list[str] = []
    for entry in payload.get("types") or []:
        if not isinstance(entry, dict):
            continue
        type_info = entry.get("type")
        name = type_info.get("name") if isinstance(type_info, dict) else None
        if isinstance(name, str):
            out.append(name)
    return out


def pick_random(max_id: int, shiny_odds: int, rng: random.Random | None = None) -> Selection:
    rng = rng or random.Random()
    pokemon_id = rng.randint(1, max(1, max_id))
    shiny = rng.randint(1, max(1, shiny_odds)) == 1
    return Selection(id=pokemon_id, shiny=shiny)


class PokeApiClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout_s: int = 30) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

    def _get_json(self, url: str) -> Any:
        request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT, "Accept": "application/json"})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout_s, context=_build_ssl_context()) as resp:
                return json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as exc:
            raise PokeApiError(f"GET {url} failed with HTTP {exc.code}") from exc
        except (urllib.error.URLError, TimeoutError) as exc:
            raise PokeApiError(f"GET {url} failed: {exc}") from exc
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PokeApiError(f"GET {url} returned malformed JSON") from exc

    def fetch(self, pokemon_id: int) -> Pokemon:
        payload = self._get_json(f"{self.base_url}/pokemon/{pokemon_id}")
        if not isinstance(payload, dict) or not isinstance(payload.get("name"), str):
            raise PokeApiError(f"pokemon {pokemon_id}: response has no name")
        return Pokemon(
            id=int(payload.get("id", pokemon_id)),
            name=payload["name"],
            types=extract_types(payload),
        )
