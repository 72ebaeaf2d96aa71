import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from funcoes_utilitarias._normalize_node_id import _normalize_node_id
from funcoes_utilitarias._parse_distance import _parse_distance
from funcoes_utilitarias._is_status_operational import _is_status_operational

@dataclass(frozen=True)
class SegmentRecord:
    '''
    Trecho de via entre dois pontos, como recebido da fonte de dados.
    - start, end : ids dos pontos (str opaca, diferencia maiúsculas)
    - distance   : distância do trecho; None quando ausente/não numérica
    - status     : status opcional; apenas "o" (operacional) é utilizável

    Observações
    -----------
    Registros inválidos continuam representáveis: a validação fica concentrada
    em is_usable()/rejection_reason(), aplicada uma única vez na construção do grafo.
    '''
    start: Optional[str]
    end: Optional[str]
    distance: Optional[float]
    status: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "SegmentRecord":
        '''
        Constrói um SegmentRecord a partir de um dicionário "solto" (linha de
        planilha/JSON) sem lançar exceções.

        Parâmetros
        ----------
        raw : Mapping[str, Any] com chaves start, end, distance e status (opcional)

        Retorno
        -------
        SegmentRecord : campos inválidos viram None
        '''
        status = raw.get("status")
        if status is None or (isinstance(status, float) and math.isnan(status)) or status == "":
            status = None
        else:
            status = str(status)
        return cls(
            start=_normalize_node_id(raw.get("start")),
            end=_normalize_node_id(raw.get("end")),
            distance=_parse_distance(raw.get("distance")),
            status=status,
        )

    def rejection_reason(self) -> str | None:
        '''
        Retorna o motivo pelo qual o trecho não pode entrar no grafo, ou None
        se ele é utilizável.
        '''
        if not self.start or not self.end:
            return "ponto inicial/final ausente"
        if _parse_distance(self.distance) is None:
            return f"distância inválida ({self.distance!r})"
        if not _is_status_operational(self.status):
            return f"status não operacional ({self.status!r})"
        return None

    def is_usable(self) -> bool:
        return self.rejection_reason() is None
