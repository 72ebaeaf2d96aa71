# Constantes: filtro de status dos trechos
# Único valor aceito como "operacional" (comparação sem diferenciar maiúsculas)
OPERATIONAL_STATUS = "o"

# Colunas esperadas na fonte de trechos (CSV/JSON)
SEGMENT_COLUMNS = ("start", "end", "distance", "status")


# Unidade exibida junto da distância total
DISTANCE_UNIT = "km"


# Estratégias de seleção do próximo nó no Dijkstra
SOLVER_METHODS = ("heap", "linear", "networkx")
DEFAULT_METHOD = "heap"
