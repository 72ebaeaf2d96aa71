def _format_distance(distance: float) -> str:
    '''Formata a distância com até 3 casas, sem zeros à direita (8.0 -> "8", 2.5 -> "2.5").'''
    return f"{distance:.3f}".rstrip("0").rstrip(".")
