import math
from dataclasses import dataclass, field

@dataclass
class PathResult:
    '''
    Resultado de uma consulta de caminho mínimo.
    - path     : sequência de nós da origem ao destino (vazia se não há rota)
    - distance : distância total; math.inf quando não há rota
    '''
    path: list[str] = field(default_factory=list)
    distance: float = math.inf

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls([], math.inf)

    @property
    def found(self) -> bool:
        '''True quando existe rota (inclusive origem == destino, distância 0).'''
        return bool(self.path) and math.isfinite(self.distance)
