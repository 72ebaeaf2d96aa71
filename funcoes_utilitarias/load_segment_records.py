import json
import logging
from pathlib import Path
from typing import Any, Dict, List
import pandas as pd
from constantes.constantes import SEGMENT_COLUMNS

logger = logging.getLogger(__name__)


class SegmentSourceError(ValueError):
    '''Falha ao obter os trechos da fonte de dados (arquivo ausente, JSON ilegível, envelope com erro).'''


def records_from_payload(payload: Any) -> List[Dict[str, Any]]:
    '''
    Extrai a lista de trechos de um documento JSON já decodificado. Aceita
    uma lista de objetos ou o envelope {"success": bool, "data": [...], "error": str}
    devolvido pela planilha publicada.

    Parâmetros
    ----------
    payload : objeto JSON decodificado

    Retorno
    -------
    List[Dict[str, Any]] : linhas cruas (apenas objetos; demais itens são ignorados)
    '''

    if isinstance(payload, dict):
        if not payload.get("success") or payload.get("data") is None:
            message = payload.get("error") or "Erro desconhecido no servidor."
            raise SegmentSourceError(f"Fonte de trechos retornou erro: {message}")
        payload = payload["data"]

    if not isinstance(payload, list):
        raise SegmentSourceError(f"Formato de trechos não reconhecido: {type(payload).__name__}")

    rows = [row for row in payload if isinstance(row, dict)]
    if len(rows) != len(payload):
        logger.warning("%d itens da fonte não são objetos e foram ignorados", len(payload) - len(rows))
    return rows


def _read_csv_rows(csv_path: Path) -> List[Dict[str, Any]]:
    # Tudo como texto: a validação numérica fica com SegmentRecord.from_raw
    segments_df = pd.read_csv(csv_path, dtype=str)
    missing = [c for c in SEGMENT_COLUMNS[:3] if c not in segments_df.columns]
    if missing:
        logger.warning("Colunas ausentes em %s: %s", csv_path, ", ".join(missing))
    segments_df = segments_df.astype(object).where(segments_df.notna(), None)
    return segments_df.to_dict(orient="records")


def load_segment_records(segments_path: str | Path) -> List[Dict[str, Any]]:
    '''
    Lê os trechos de um arquivo CSV (colunas start,end,distance[,status]) ou
    JSON (lista ou envelope) e devolve as linhas cruas, sem validá-las.

    Parâmetros
    ----------
    segments_path : caminho do arquivo de trechos

    Retorno
    -------
    List[Dict[str, Any]] : linhas cruas, na ordem do arquivo

    Observações
    -----------
    - Lança SegmentSourceError se o arquivo não existe ou não pode ser lido.
    - Linhas malformadas NÃO são erro aqui; o descarte acontece no RoadGraph.build.
    '''

    path = Path(segments_path).expanduser()
    if not path.exists():
        raise SegmentSourceError(f"Arquivo de trechos não existe: {path}")

    logger.info("Lendo trechos de %s", path)
    if path.suffix.lower() == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SegmentSourceError(f"JSON inválido em {path}: {exc}") from exc
        except OSError as exc:
            raise SegmentSourceError(f"Não foi possível ler {path}: {exc}") from exc
        rows = records_from_payload(payload)
    else:
        try:
            rows = _read_csv_rows(path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise SegmentSourceError(f"CSV inválido em {path}: {exc}") from exc
        except OSError as exc:
            raise SegmentSourceError(f"Não foi possível ler {path}: {exc}") from exc

    logger.info("%d trechos lidos", len(rows))
    return rows
