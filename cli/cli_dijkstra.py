from algoritmo_do_caminho_minimo.dijkstra import dijkstra
from classes_de_elementos.road_graph import RoadGraph
from constantes.constantes import DEFAULT_METHOD, DISTANCE_UNIT
from funcoes_utilitarias.format_path_result import format_path_result
from funcoes_utilitarias.load_segment_records import load_segment_records

def cli_dijkstra(segments_path: str, start: str, end: str,
                 method: str = DEFAULT_METHOD, unit: str = DISTANCE_UNIT) -> None:
    '''
    Calcula o menor caminho por Dijkstra entre dois pontos nomeados e imprime
    a rota com a distância total (ou o motivo de não haver rota).

    Parâmetros
    ----------
    segments_path : str (caminho para CSV/JSON de trechos)
    start, end    : str (pontos de origem e destino)
    method        : str ('heap' | 'linear' | 'networkx')
    unit          : str (unidade exibida junto da distância)

    Retorno
    -------
    None
    '''

    records = load_segment_records(segments_path)
    if not records:
        print(f"Nenhum trecho carregado de {segments_path}.")
        return
    if not start or not end:
        print("Selecione os dois pontos.")
        return
    if start == end:
        print("Os pontos de origem e destino são iguais!")
        return

    graph = RoadGraph.build(records)
    if start not in graph or end not in graph:
        print("Um ou ambos os pontos não estão conectados à malha viária.")
        return

    result = dijkstra(graph, start, end, method=method)
    print(format_path_result(result, start, end, unit))
