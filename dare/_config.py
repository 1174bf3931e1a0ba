"""Konfiguracja CLI — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(pathlib.Path.cwd() / ".env")


@dataclass(frozen=True, slots=True)
class Settings:
    console_width:   int
    recursion_limit: int


def get_settings() -> Settings:
    return Settings(
        console_width   = int(os.getenv("DARE_CONSOLE_WIDTH",   "200")),
        recursion_limit = int(os.getenv("DARE_RECURSION_LIMIT", "10000")),
    )
