from typing import Any, Iterable, List, Mapping, Union
from classes_de_elementos.segment_record import SegmentRecord
from funcoes_utilitarias._normalize_node_id import _normalize_node_id

def distinct_points(records: Iterable[Union[SegmentRecord, Mapping[str, Any]]]) -> List[str]:
    '''
    Coleta os pontos distintos (start/end) de todos os trechos, inclusive os
    que serão descartados pelo grafo, ordenados para exibição.

    Parâmetros
    ----------
    records : iterável de SegmentRecord ou dicionários crus

    Retorno
    -------
    List[str] : pontos distintos em ordem crescente
    '''

    points: set[str] = set()
    for record in records:
        if isinstance(record, SegmentRecord):
            endpoints = (record.start, record.end)
        else:
            endpoints = (_normalize_node_id(record.get("start")), _normalize_node_id(record.get("end")))
        points.update(p for p in endpoints if p)
    return sorted(points)
