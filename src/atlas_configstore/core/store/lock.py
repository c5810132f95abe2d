# src/atlas_configstore/core/store/lock.py
"""
Lock leitores-escritor para o store.

Vários leitores podem manter o lock simultaneamente; um escritor exige
exclusividade e bloqueia novos leitores enquanto aguarda, de modo que
escritas não sofram starvation sob leitura contínua.

Limites explícitos:
    - Não é reentrante (um escritor não pode readquirir o lock)
    - Não suporta timeout nem cancelamento
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class RWLock:
    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
