import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union
import networkx as nx
from classes_de_elementos.edge import Edge
from classes_de_elementos.segment_record import SegmentRecord
from funcoes_utilitarias.load_segment_records import load_segment_records

logger = logging.getLogger(__name__)

RawSegment = Union[SegmentRecord, Mapping[str, Any]]

class RoadGraph:
    '''
    Representa o grafo não-dirigido e ponderado G=(V,E) da malha viária.
    - adj[u] = lista de objetos Edge saindo de u (na ordem de inserção)
    - w = distância do trecho; cada trecho válido gera u->v e v->u

    Observações
    -----------
    O grafo é reconstruído a cada consulta a partir do conjunto atual de
    trechos; nada aqui é alterado de forma incremental pelo Dijkstra.
    Arestas paralelas (mesmo par de pontos em vários trechos) são mantidas.
    '''
    def __init__(self, adj: Optional[Dict[str, List[Edge]]] = None) -> None:
        '''
        Inicializa a lista de adjacência (vazia por padrão).
        '''
        self.adj: Dict[str, List[Edge]] = adj if adj is not None else {}

    @classmethod
    def build(cls, records: Iterable[RawSegment]) -> "RoadGraph":
        '''
        Constrói o grafo a partir de uma sequência de trechos, descartando em
        silêncio os trechos inválidos (ponto ausente, distância não numérica
        ou negativa, status diferente de "o").

        Parâmetros
        ----------
        records : iterável de SegmentRecord ou dicionários crus

        Retorno
        -------
        RoadGraph : grafo com exatamente duas arestas por trecho aceito

        Observações
        -----------
        - Nunca lança exceção por dado malformado; o motivo do descarte é
          registrado em nível DEBUG.
        '''
        graph = cls()
        accepted = rejected = 0

        for index, raw in enumerate(records):
            record = raw if isinstance(raw, SegmentRecord) else SegmentRecord.from_raw(raw)
            reason = record.rejection_reason()
            if reason is not None:
                rejected += 1
                logger.debug("Trecho %d descartado: %s", index, reason)
                continue

            graph.add_segment(record.start, record.end, float(record.distance))
            accepted += 1

        logger.info(
            "Grafo construído: %d trechos aceitos, %d descartados, |V|=%d |E|=%d",
            accepted, rejected, graph.node_count(), graph.edge_count(),
        )
        return graph

    @classmethod
    def load_graph(cls, segments_path: str) -> "RoadGraph":
        '''
        Lê o arquivo de trechos (CSV ou JSON) e constrói o grafo.

        Parâmetros
        ----------
        segments_path : caminho do arquivo de trechos

        Retorno
        -------
        RoadGraph : instância pronta para consulta
        '''
        return cls.build(load_segment_records(segments_path))

    def add_segment(self, start: str, end: str, distance: float) -> None:
        '''
        Registra um trecho já validado como duas arestas dirigidas.
        '''
        self.adj.setdefault(start, []).append(Edge(to=end, w=distance))
        self.adj.setdefault(end, []).append(Edge(to=start, w=distance))

    def neighbors(self, u: str) -> List[Edge]:
        '''
        Retorna as arestas saindo de u (lista vazia se u não existe no grafo).
        '''
        return list(self.adj.get(u, []))

    def nodes(self) -> List[str]:
        return list(self.adj)

    def edge_count(self) -> int:
        '''
        Calcula a quantidade total de arestas dirigidas do grafo.

        Retorno
        -------
        int : |E| (soma dos comprimentos das listas de adjacência)
        '''
        return sum(len(edge_list) for edge_list in self.adj.values())

    def node_count(self) -> int:
        return len(self.adj)

    def to_networkx(self) -> nx.MultiDiGraph:
        '''
        Converte a lista de adjacência em um nx.MultiDiGraph com peso 'd',
        preservando arestas paralelas e nós isolados.
        '''
        G = nx.MultiDiGraph()
        G.add_nodes_from(self.adj)
        for u, edges in self.adj.items():
            for edge in edges:
                G.add_edge(u, edge.to, d=edge.w)
        return G

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.adj

    def __iter__(self) -> Iterator[str]:
        return iter(self.adj)

    def __len__(self) -> int:
        return len(self.adj)
