from classes_de_elementos.path_result import PathResult
from constantes.constantes import DISTANCE_UNIT
from funcoes_utilitarias._format_distance import _format_distance

def format_path_result(result: PathResult, source_node_id: str, target_node_id: str,
                       unit: str = DISTANCE_UNIT) -> str:
    '''
    Monta a mensagem exibida ao usuário para o resultado de uma consulta.

    Parâmetros
    ----------
    result         : PathResult
    source_node_id : str (origem escolhida)
    target_node_id : str (destino escolhido)
    unit           : str (unidade exibida, ex.: "km")

    Retorno
    -------
    str : "sem rota" ou a rota formatada com a distância total
    '''

    if not result.found:
        return f"Nenhum caminho disponível entre {source_node_id} e {target_node_id}!"
    route = " → ".join(result.path)
    return f"Menor caminho: {route} (Distância: {_format_distance(result.distance)} {unit})"
