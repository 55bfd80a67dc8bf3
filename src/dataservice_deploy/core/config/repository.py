# src/dataservice_deploy/core/config/repository.py
"""
Repositório do arquivo de configuração persistido.

Este módulo define o `ConfigFileRepository`, responsável por carregar e
gravar o PropertyStore persistido (a fonte de verdade entre execuções do
orquestrador), e o `ConfigPathProvider`, que resolve o caminho do arquivo.

Responsabilidades do módulo:
    - Resolver o caminho do arquivo via provider injetado
    - Carregar o store sempre do disco (sem cache)
    - Gravar de forma atômica
    - Detectar escrita concorrente via compare-and-swap por checksum
    - Traduzir falhas de I/O e formato para `PersistenceIOError`

Decisões arquiteturais:
    - O provider de caminho é injetado, não um singleton de processo
    - A versão de um load é o checksum SHA-256 dos bytes lidos
    - O check de versão e a substituição do arquivo ocorrem sob um lock
      do repositório; entre processos resta uma janela entre o checksum
      e o `os.replace`

Limites explícitos:
    - Não faz merge nem reconciliação
    - Não realiza retry
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Tuple, Union, runtime_checkable

import yaml  # PyYAML

from dataservice_deploy.core.errors import persisted_config_conflict, persistence_io_error
from dataservice_deploy.core.exceptions import PersistedConfigConflict, PersistenceIOError

from .codec import decode, format_for, write_properties_file
from .errors import ConfigError, ConfigFileNotFoundError
from .hashing import compute_bytes_checksum
from .properties import PropertyStore


@runtime_checkable
class ConfigPathProvider(Protocol):
    """Fornece o caminho do arquivo de configuração persistido."""

    def get_config_filename(self) -> Path:
        ...


@dataclass(frozen=True)
class StaticConfigPath:
    """Provider de caminho fixo."""

    path: Union[str, Path]

    def get_config_filename(self) -> Path:
        return Path(self.path)


class ConfigFileRepository:
    """Load/store do PropertyStore persistido com compare-and-swap opcional."""

    def __init__(self, path_provider: ConfigPathProvider):
        self.path_provider = path_provider
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return Path(self.path_provider.get_config_filename())

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------
    def _read(self, path: Path) -> Tuple[PropertyStore, str]:
        try:
            fmt = format_for(path)
            if not path.exists():
                raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")
            raw = path.read_bytes()
            data = decode(raw.decode("utf-8"), fmt)
        except (ConfigError, OSError, ValueError, yaml.YAMLError) as e:
            # ValueError cobre JSONDecodeError e UnicodeDecodeError
            raise self._io_error(path, "load", e) from e
        return PropertyStore(data), compute_bytes_checksum(raw)

    def load(self) -> PropertyStore:
        """
        Carrega o store do disco (leitura nova a cada chamada).

        Raises:
            PersistenceIOError: Em caso de arquivo ausente, ilegível ou inválido.
        """
        store, _ = self._read(self.path)
        return store

    def load_versioned(self) -> Tuple[PropertyStore, str]:
        """Carrega o store e retorna junto o checksum dos bytes lidos."""
        return self._read(self.path)

    def checksum(self) -> Optional[str]:
        """Checksum do arquivo atual, ou None se ele não existir."""
        path = self.path
        try:
            return compute_bytes_checksum(path.read_bytes())
        except FileNotFoundError:
            return None
        except OSError as e:
            raise self._io_error(path, "checksum", e) from e

    # ------------------------------------------------------------------
    # Escrita
    # ------------------------------------------------------------------
    def store(self, store: PropertyStore, *, expected_version: Optional[str] = None) -> str:
        """
        Grava o store de forma atômica e retorna o checksum gravado.

        Com `expected_version`, o arquivo atual precisa ter exatamente esse
        checksum; caso contrário nada é gravado.

        Raises:
            PersistedConfigConflict: Se o arquivo mudou desde o load versionado.
            PersistenceIOError: Em caso de falha de escrita ou formato.
        """
        path = self.path
        with self._lock:
            if expected_version is not None:
                actual = self.checksum()
                if actual != expected_version:
                    raise PersistedConfigConflict.from_payload(
                        persisted_config_conflict(
                            path=str(path),
                            expected_version=expected_version,
                            actual_version=actual or "<ausente>",
                        )
                    )
            try:
                write_properties_file(path, store.to_dict())
                written = compute_bytes_checksum(path.read_bytes())
            except (ConfigError, OSError, yaml.YAMLError) as e:
                raise self._io_error(path, "store", e) from e
        return written

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _io_error(path: Path, operation: str, exc: Exception) -> PersistenceIOError:
        return PersistenceIOError.from_payload(  # type: ignore[return-value]
            persistence_io_error(
                path=str(path),
                operation=operation,
                exc_type=exc.__class__.__name__,
                exc_message=str(exc) or None,
            )
        )


__all__ = ["ConfigFileRepository", "ConfigPathProvider", "StaticConfigPath"]
