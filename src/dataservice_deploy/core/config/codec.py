# src/dataservice_deploy/core/config/codec.py
"""
Codec do arquivo de configuração persistido.

Este módulo lê e escreve a representação em disco de um PropertyStore:
texto hierárquico chave → valor em YAML ou JSON, escolhido pela extensão.

Decisões arquiteturais:
    - O formato é decidido apenas pela extensão do arquivo
    - A ordem de inserção das chaves é preservada na escrita
    - A escrita é atômica (arquivo temporário + `os.replace`)

Invariantes:
    - A leitura sempre retorna um `dict`
    - Arquivo vazio é lido como `{}`
    - `write(read(path))` preserva o conteúdo desserializado

Limites explícitos:
    - Não faz merge nem reconciliação
    - Não faz controle de concorrência (ver `repository`)
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

import yaml  # PyYAML

from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


def format_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix or '<sem extensão>'}")


def decode(text: str, fmt: str) -> Dict[str, Any]:
    if fmt == "yaml":
        data = yaml.safe_load(text)
    else:
        data = json.loads(text) if text.strip() else None

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )
    return data


def encode(data: Dict[str, Any], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def read_properties_file(path: Path) -> Dict[str, Any]:
    """
    Carrega o arquivo de configuração e valida sua estrutura básica.

    Args:
        path (Path): Caminho do arquivo.

    Returns:
        Dict[str, Any]: Conteúdo desserializado.

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
        yaml.YAMLError / json.JSONDecodeError: Se o conteúdo for inválido.
    """
    fmt = format_for(path)
    if not path.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")
    return decode(path.read_text(encoding="utf-8"), fmt)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_properties_file(path: Path, data: Dict[str, Any]) -> None:
    """
    Persiste o conteúdo de forma atômica no caminho indicado.

    O conteúdo é escrito em um arquivo temporário no mesmo diretório e
    então movido com `os.replace`; leitores nunca observam escrita parcial.

    Raises:
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        OSError: Em caso de falha de escrita.
    """
    fmt = format_for(path)
    text = encode(data, fmt)

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        else:
            # mkstemp cria com 0600; arquivo novo segue o umask do processo
            os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


__all__ = ["decode", "encode", "format_for", "read_properties_file", "write_properties_file"]
