from dataclasses import dataclass

@dataclass(frozen=True)
class Edge:
    '''
    Aresta dirigida u->to com:
    - to (destino), w (peso = distância do trecho)

    Observações
    -----------
    Cada trecho válido gera duas arestas (uma em cada sentido), o que dá ao
    grafo semântica de não-dirigido. Dataclass imutável (frozen=True).
    '''
    to: str
    w: float
