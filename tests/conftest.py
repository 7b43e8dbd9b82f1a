"""Shared fixtures: deterministic keys and an environment free of DATANEXUS_* settings."""

from __future__ import annotations

import os
from typing import Callable, Iterator

import pytest
from solders.pubkey import Pubkey

from datanexus.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("DATANEXUS_"):
            monkeypatch.delenv(name)
    # keep a stray .env in the working tree from leaking into Settings()
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def key() -> Callable[[int], Pubkey]:
    def _key(n: int) -> Pubkey:
        return Pubkey(bytes([n]) * 32)

    return _key


@pytest.fixture
def program_id(key) -> Pubkey:
    return key(200)
