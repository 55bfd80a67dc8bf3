# src/dataservice_deploy/core/__init__.py
"""
Core do deploy de serviços de dados replicados.

Componentes principais:
    - config   → PropertyStore, merge, codec, repositório persistido, hashing
    - pipeline → protocolo de Step, contexto de execução e registry
    - errors / exceptions → taxonomia de falhas do deploy

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda falha é tipada e propagada
    - Dependências (configuração, repositório, backend) são explícitas
    - A visão mesclada de configuração nunca é persistida

Limites explícitos:
    - Não implementa o serviço de replicação nem seu protocolo
    - Não sequencia Steps (o orquestrador é externo)
"""
