# src/dataservice_deploy/core/config/hashing.py
"""
Hashing canônico de configuração.

Dois tipos de identidade são produzidos aqui:
    - `compute_config_hash`: identidade estrutural (JSON canônico, chaves
      ordenadas), independente da ordem original e do formato em disco
    - `compute_file_checksum`: identidade dos bytes do arquivo persistido,
      usada como tag de versão no compare-and-swap do repositório

Invariantes:
    - O valor retornado é sempre uma string hexadecimal de 64 caracteres
    - Nenhuma mutação ocorre sobre o input
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Union

from .properties import PropertyStore


def compute_config_hash(config: Union[Dict[str, Any], PropertyStore]) -> str:
    """
    Gera um hash SHA-256 determinístico da configuração.

    Política de hashing:
        - Serialização JSON canônica com ordenação estável de chaves
        - Separadores compactos, codificação UTF-8

    Raises:
        TypeError: Se o objeto fornecido não for dict nem PropertyStore.
    """
    if isinstance(config, PropertyStore):
        config = config.to_dict()

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_bytes_checksum(raw: bytes) -> str:
    return hashlib.sha256(raw).hexdigest()


def compute_file_checksum(path: Path) -> str:
    """Checksum SHA-256 dos bytes do arquivo. Propaga OSError."""
    return compute_bytes_checksum(Path(path).read_bytes())
