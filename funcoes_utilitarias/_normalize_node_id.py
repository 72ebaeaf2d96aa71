import math

def _normalize_node_id(raw_node: object) -> str | None:
    '''Converte o identificador cru de um ponto em str; None/NaN/"" viram None.
    O valor não é aparado nem convertido de caixa: ids são opacos.'''

    if raw_node is None:
        return None
    if isinstance(raw_node, float) and math.isnan(raw_node):
        return None
    node_id = raw_node if isinstance(raw_node, str) else str(raw_node)
    return node_id or None
