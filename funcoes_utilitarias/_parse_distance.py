import math
from numbers import Real

def _parse_distance(raw_distance: object) -> float | None:
    '''
    Converte a distância crua de um trecho em float, aceitando números e
    strings numéricas (planilhas costumam exportar números como texto).

    Parâmetros
    ----------
    raw_distance : object (valor lido da fonte de dados)

    Retorno
    -------
    float | None : distância finita e não negativa; None se inválida
    '''

    if raw_distance is None or isinstance(raw_distance, bool):
        return None
    if isinstance(raw_distance, Real):
        distance = float(raw_distance)
    elif isinstance(raw_distance, str):
        try:
            distance = float(raw_distance.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(distance) or distance < 0:
        return None
    return distance
