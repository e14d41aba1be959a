"""Protocolo de domínio para o store de registros append-only."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from flora_services.domain.models import Record

RecordT = TypeVar("RecordT", bound=Record)


class RecordStore(ABC, Generic[RecordT]):
    """Sequência ordenada de registros de um único tipo.

    Regras:
    - Só cresce por ``append``; registros nunca são alterados ou removidos
    - ``id`` vem de um contador monotônico do próprio store, nunca do tamanho
      da sequência
    - ``list`` devolve cópia na ordem de inserção
    """

    @abstractmethod
    def append(self, build: Callable[[int], RecordT]) -> RecordT:
        """Reserva o próximo id, constrói o registro e o insere no fim.

        Args:
            build: recebe o id reservado e retorna o registro completo

        Returns:
            O registro armazenado
        """
        ...

    @abstractmethod
    def list(self) -> list[RecordT]:  # noqa: A003
        ...

    @abstractmethod
    def count(self) -> int: ...
