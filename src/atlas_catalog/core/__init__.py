"""
Core do Atlas Catalog.

Componentes principais:
    - config         → opções de construção (modelo, loader YAML/JSON, merge)
    - backends       → variantes de backend e protocolos de colaboradores
    - selector       → seleção determinística e registro de backends
    - catalog        → fachada `Catalog` (ciclo de build, validade, acessores)
    - resource_index → lookup O(1) por (type, title)
    - hooks          → decisão de conversão de recursos File pós-build
    - parallel       → construção de vários catálogos, um por nó

Limites explícitos:
    - Não compara catálogos (diff)
    - Não implementa compilador, transporte remoto nem conversão de File
"""
