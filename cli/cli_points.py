from funcoes_utilitarias.distinct_points import distinct_points
from funcoes_utilitarias.load_segment_records import load_segment_records

def cli_points(segments_path: str) -> None:
    '''
    Imprime, um por linha, os pontos distintos que podem ser escolhidos como
    origem/destino.

    Parâmetros
    ----------
    segments_path : str (caminho para CSV/JSON de trechos)
    '''

    for point in distinct_points(load_segment_records(segments_path)):
        print(point)
