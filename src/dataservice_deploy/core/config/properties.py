# src/dataservice_deploy/core/config/properties.py
"""
PropertyStore: árvore ordenada e hierárquica de configuração.

Este módulo define o contêiner canônico de configuração usado pelos Steps
de deploy. Um PropertyStore mapeia caminhos de chave (sequências de
segmentos string) para valores escalares opacos ou sub-árvores.

Responsabilidades do módulo:
    - Leitura pontual por caminho (`get`, `has`, `get_or_default`)
    - Extração de sub-árvore (`get_scoped`)
    - Sobreposição de stores (`merge`) sem mutar entradas
    - Escrita pontual in-place (`set_property`, `remove_property`)
    - Serialização via `codec` (`load`, `store`)

Política de caminhos:
    - Um caminho é uma sequência de strings ou uma string pontuada
      (`"repl_services.svc1"`)
    - Segmentos vazios são rejeitados com `InvalidKeyPathError`

Invariantes:
    - Lookups são determinísticos
    - A ordem de inserção das chaves é preservada
    - Valores entregues ou recebidos são copiados em profundidade;
      nenhum chamador mantém referência à árvore interna

Limites explícitos:
    - Não há locking: uma instância assume um único escritor
    - Não valida semântica de domínio dos valores
"""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union

from .errors import InvalidKeyPathError, KeyNotFoundError

KeyPath = Union[str, Sequence[str]]


def normalize_path(path: KeyPath) -> Tuple[str, ...]:
    """
    Converte um caminho de chave para sua forma canônica (tupla de segmentos).

    Args:
        path (KeyPath): String pontuada ou sequência de segmentos.

    Returns:
        Tuple[str, ...]: Segmentos do caminho.

    Raises:
        InvalidKeyPathError: Se o caminho for vazio ou contiver segmentos inválidos.
    """
    if isinstance(path, str):
        segments: Tuple[Any, ...] = tuple(path.split("."))
    else:
        segments = tuple(path)

    if not segments:
        raise InvalidKeyPathError("Caminho de chave vazio")

    for seg in segments:
        if not isinstance(seg, str) or not seg:
            raise InvalidKeyPathError(f"Segmento de caminho inválido: {seg!r} em {segments!r}")

    return segments


def _plain(value: Any) -> Any:
    if isinstance(value, PropertyStore):
        return value.to_dict()
    return deepcopy(value)


class PropertyStore:
    """
    Contêiner hierárquico chave-caminho → valor.

    A representação interna é um `dict` aninhado. Sub-árvores são dicts;
    qualquer outro valor é tratado como escalar opaco (listas inclusive).

    Decisões arquiteturais:
        - `merge` é funcional e sempre produz um novo store
        - `set_property` e `remove_property` são as únicas operações mutáveis
        - Igualdade é estrutural (compara também com `dict` puro)
    """

    __slots__ = ("_props",)

    def __init__(self, props: Dict[str, Any] | None = None):
        if props is None:
            props = {}
        if not isinstance(props, dict):
            raise TypeError(f"PropertyStore requer dict, recebido: {type(props).__name__}")
        self._props: Dict[str, Any] = deepcopy(props)

    # ------------------------------------------------------------------
    # Construção / conversão
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyStore":
        return cls(data)

    def to_dict(self) -> Dict[str, Any]:
        """Retorna uma cópia profunda e independente da árvore."""
        return deepcopy(self._props)

    def copy(self) -> "PropertyStore":
        return PropertyStore(self._props)

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------
    def _lookup(self, segments: Tuple[str, ...]) -> Any:
        node: Any = self._props
        for seg in segments:
            if not isinstance(node, dict) or seg not in node:
                raise KeyNotFoundError(segments)
            node = node[seg]
        return node

    def get(self, path: KeyPath) -> Any:
        """
        Leitura pontual por caminho.

        Um caminho que atravessa um valor escalar é tratado como ausente.
        Sub-árvores são retornadas como `dict` (cópia profunda).

        Raises:
            KeyNotFoundError: Se o caminho não existir.
            InvalidKeyPathError: Se o caminho for inválido.
        """
        return deepcopy(self._lookup(normalize_path(path)))

    def has(self, path: KeyPath) -> bool:
        try:
            self._lookup(normalize_path(path))
        except KeyNotFoundError:
            return False
        return True

    def get_or_default(self, path: KeyPath, default: Any = None) -> Any:
        if not self.has(path):
            return default
        return self.get(path)

    def get_scoped(self, prefix: KeyPath) -> "PropertyStore":
        """
        Retorna a sub-árvore enraizada em `prefix` como novo PropertyStore.

        Se o prefixo não existir, ou apontar para um valor que não é
        sub-árvore, retorna um store vazio.
        """
        segments = normalize_path(prefix)
        try:
            node = self._lookup(segments)
        except KeyNotFoundError:
            return PropertyStore()
        if not isinstance(node, dict):
            return PropertyStore()
        return PropertyStore(node)

    def keys(self) -> List[str]:
        return list(self._props.keys())

    # ------------------------------------------------------------------
    # Escrita (in-place)
    # ------------------------------------------------------------------
    def set_property(self, path: KeyPath, value: Any) -> None:
        """
        Escreve um valor no caminho, criando nós intermediários ausentes.

        Raises:
            InvalidKeyPathError: Se um nó intermediário for escalar.
        """
        segments = normalize_path(path)
        node = self._props
        for i, seg in enumerate(segments[:-1]):
            child = node.get(seg)
            if child is None and seg not in node:
                child = {}
                node[seg] = child
            elif not isinstance(child, dict):
                raise InvalidKeyPathError(
                    f"Não é possível escrever em {'.'.join(segments)}: "
                    f"{'.'.join(segments[: i + 1])} não é uma sub-árvore"
                )
            node = child
        node[segments[-1]] = _plain(value)

    def remove_property(self, path: KeyPath) -> bool:
        """Remove o caminho, se existir. Retorna True quando algo foi removido."""
        segments = normalize_path(path)
        try:
            parent = self._lookup(segments[:-1]) if len(segments) > 1 else self._props
        except KeyNotFoundError:
            return False
        if not isinstance(parent, dict) or segments[-1] not in parent:
            return False
        del parent[segments[-1]]
        return True

    # ------------------------------------------------------------------
    # Overlay
    # ------------------------------------------------------------------
    @staticmethod
    def merge(base: "PropertyStore", overlay: "PropertyStore") -> "PropertyStore":
        return merge(base, overlay)

    # ------------------------------------------------------------------
    # Persistência
    # ------------------------------------------------------------------
    @classmethod
    def load(cls, path: Union[str, Path]) -> "PropertyStore":
        from .codec import read_properties_file

        return cls(read_properties_file(Path(path)))

    def store(self, path: Union[str, Path]) -> None:
        from .codec import write_properties_file

        write_properties_file(Path(path), self._props)

    # ------------------------------------------------------------------
    # Protocolos Python
    # ------------------------------------------------------------------
    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, tuple, list)):
            return False
        try:
            return self.has(path)  # type: ignore[arg-type]
        except InvalidKeyPathError:
            return False

    def __len__(self) -> int:
        return len(self._props)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._props.keys()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyStore):
            return self._props == other._props
        if isinstance(other, dict):
            return self._props == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PropertyStore({self._props!r})"


def merge(base: PropertyStore, overlay: PropertyStore) -> PropertyStore:
    """
    Sobrepõe `overlay` a `base`, produzindo um novo PropertyStore.

    Política de merge:
        - As chaves de topo do resultado são a união de `base` e `overlay`
        - Em conflito, o valor de `overlay` vence integralmente
          (sub-árvores não são mescladas recursivamente)
        - A ordem é a de `base`, seguida das chaves novas de `overlay`

    Invariantes:
        - Nenhum dos inputs é mutado
        - O mesmo par (base, overlay) sempre produz o mesmo resultado

    Args:
        base (PropertyStore): Configuração base (ex.: contexto global).
        overlay (PropertyStore): Sobreposição (ex.: registro por serviço).

    Returns:
        PropertyStore: Novo store resultante.
    """
    if not isinstance(base, PropertyStore) or not isinstance(overlay, PropertyStore):
        raise TypeError(
            f"merge requer PropertyStore, recebido: "
            f"{type(base).__name__} vs {type(overlay).__name__}"
        )

    result = base.to_dict()
    for key, value in overlay._props.items():
        result[key] = deepcopy(value)
    return PropertyStore(result)


__all__ = ["KeyPath", "PropertyStore", "merge", "normalize_path"]
