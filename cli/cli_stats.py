from classes_de_elementos.road_graph import RoadGraph

def cli_stats(segments_path: str) -> None:
    '''
    Carrega o grafo a partir do arquivo de trechos e imprime estatísticas básicas: |V| e |E|.

    Parâmetros
    ----------
    segments_path : str (caminho para CSV/JSON de trechos)

    Retorno
    -------
    None
    '''

    graph = RoadGraph.load_graph(segments_path)
    print(f"RoadGraph |V|={graph.node_count()} |E|={graph.edge_count()}")
