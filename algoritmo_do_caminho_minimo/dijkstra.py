import heapq
import logging
import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
import networkx as nx
from classes_de_elementos.edge import Edge
from classes_de_elementos.path_result import PathResult
from classes_de_elementos.road_graph import RoadGraph
from constantes.constantes import DEFAULT_METHOD, SOLVER_METHODS

logger = logging.getLogger(__name__)

GraphLike = Union[RoadGraph, Mapping[str, Sequence[Edge]]]


def _reconstruct_path(predecessor: Dict[str, Optional[str]],
                      source_node_id: str, target_node_id: str) -> List[str]:
    '''
    Reconstrói a sequência de nós a partir do dicionário de predecessores
    {nó: nó_anterior}, andando do destino até um nó sem predecessor.
    '''
    path_nodes: List[str] = []
    node_cursor: Optional[str] = target_node_id
    while node_cursor is not None:
        path_nodes.append(node_cursor)
        node_cursor = predecessor.get(node_cursor)
    path_nodes.reverse()
    if path_nodes[0] != source_node_id:
        return []
    return path_nodes


def _relax(adj: Mapping[str, Sequence[Edge]], current_node_id: str,
           distance_from_source: Dict[str, float],
           predecessor: Dict[str, Optional[str]]) -> List[Tuple[float, str]]:
    '''
    Relaxa as arestas que saem de current_node_id e devolve os pares
    (nova_distância, vizinho) que melhoraram.
    '''
    improved: List[Tuple[float, str]] = []
    current_distance = distance_from_source[current_node_id]
    for edge in adj[current_node_id]:
        neighbor_node_id = edge.to
        # Destino que não é chave do grafo nunca é relaxado
        if neighbor_node_id not in distance_from_source:
            continue
        new_distance = current_distance + edge.w
        if new_distance < distance_from_source[neighbor_node_id]:
            distance_from_source[neighbor_node_id] = new_distance
            predecessor[neighbor_node_id] = current_node_id
            improved.append((new_distance, neighbor_node_id))
    return improved


def _dijkstra_heap(adj: Mapping[str, Sequence[Edge]], source_node_id: str, target_node_id: str,
                   distance_from_source: Dict[str, float],
                   predecessor: Dict[str, Optional[str]]) -> None:
    # heap com (distância, ordem do nó no grafo, nó); ordem = desempate estável
    order = {node_id: i for i, node_id in enumerate(adj)}
    priority_queue: List[Tuple[float, int, str]] = [(0.0, order[source_node_id], source_node_id)]
    visited: set[str] = set()

    while priority_queue:
        current_distance, _, current_node_id = heapq.heappop(priority_queue)
        if current_node_id in visited or current_distance > distance_from_source[current_node_id]:
            continue
        visited.add(current_node_id)
        if current_node_id == target_node_id:
            break

        for new_distance, neighbor_node_id in _relax(adj, current_node_id, distance_from_source, predecessor):
            heapq.heappush(priority_queue, (new_distance, order[neighbor_node_id], neighbor_node_id))


def _dijkstra_linear(adj: Mapping[str, Sequence[Edge]], source_node_id: str, target_node_id: str,
                     distance_from_source: Dict[str, float],
                     predecessor: Dict[str, Optional[str]]) -> None:
    # Varredura linear: O(V²), suficiente para malhas com poucas dezenas de pontos
    unvisited: Dict[str, None] = dict.fromkeys(adj)

    while unvisited:
        current_node_id: Optional[str] = None
        for node_id in unvisited:
            if current_node_id is None or distance_from_source[node_id] < distance_from_source[current_node_id]:
                current_node_id = node_id

        if current_node_id is None or distance_from_source[current_node_id] == math.inf:
            break
        del unvisited[current_node_id]
        if current_node_id == target_node_id:
            break

        _relax(adj, current_node_id, distance_from_source, predecessor)


def _dijkstra_networkx(graph: RoadGraph, source_node_id: str, target_node_id: str) -> PathResult:
    G = graph.to_networkx()
    try:
        distance, path_nodes = nx.single_source_dijkstra(G, source_node_id, target_node_id, weight="d")
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return PathResult.unreachable()
    return PathResult(list(path_nodes), float(distance))


def dijkstra(graph: GraphLike, source_node_id: str, target_node_id: str,
             method: str = DEFAULT_METHOD) -> PathResult:
    '''
    Calcula o caminho de menor distância entre dois pontos do grafo.

    Parâmetros
    ----------
    graph          : RoadGraph (ou mapeamento nó -> lista de Edge)
    source_node_id : str (ponto de origem)
    target_node_id : str (ponto de destino)
    method         : 'heap' | 'linear' | 'networkx'

    Retorno
    -------
    PathResult : (caminho, distância); caminho vazio e math.inf se não há rota

    Observações
    -----------
    - 'heap' usa heapq (padrão); 'linear' escolhe o próximo nó por varredura
      linear dos não visitados; 'networkx' delega a nx.single_source_dijkstra.
    - A busca para assim que o destino sai da fronteira.
    - Pesos são assumidos finitos e não negativos (garantido por RoadGraph.build).
    - Origem ou destino fora do grafo resulta em "sem rota", sem exceção.
    - origem == destino devolve ([origem], 0.0) sem tratamento especial.
    '''

    if method not in SOLVER_METHODS:
        raise ValueError(f"Método inválido: {method!r}. Use {', '.join(SOLVER_METHODS)}.")

    road_graph = graph if isinstance(graph, RoadGraph) else RoadGraph({u: list(e) for u, e in graph.items()})
    if source_node_id not in road_graph or target_node_id not in road_graph:
        logger.debug("Origem %r ou destino %r fora do grafo", source_node_id, target_node_id)
        return PathResult.unreachable()

    if method == "networkx":
        return _dijkstra_networkx(road_graph, source_node_id, target_node_id)

    adj = road_graph.adj
    # Estruturas de Dijkstra
    distance_from_source: Dict[str, float] = {node_id: math.inf for node_id in adj}
    predecessor: Dict[str, Optional[str]] = {node_id: None for node_id in adj}
    distance_from_source[source_node_id] = 0.0

    if method == "linear":
        _dijkstra_linear(adj, source_node_id, target_node_id, distance_from_source, predecessor)
    else:
        _dijkstra_heap(adj, source_node_id, target_node_id, distance_from_source, predecessor)

    path_nodes = _reconstruct_path(predecessor, source_node_id, target_node_id)
    if not path_nodes:
        return PathResult.unreachable()
    return PathResult(path_nodes, distance_from_source[target_node_id])
