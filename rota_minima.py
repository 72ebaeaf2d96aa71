#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
============================================================================
Menor distância entre dois pontos de uma malha viária
----------------------------------------------------------------------------
Lê um arquivo de trechos (CSV ou JSON) com as colunas:
    start, end, distance, status (opcional)

Regras de ingestão
------------------
- Trechos sem ponto inicial/final, com distância não numérica/negativa ou
  com status diferente de "o" (operacional) são descartados em silêncio.
- Cada trecho válido vira duas arestas (ida e volta).

Comandos
--------
  stats    <trechos>                 : |V| e |E| do grafo
  points   <trechos>                 : pontos disponíveis para origem/destino
  dijkstra <trechos> <origem> <dest> : menor caminho e distância total
============================================================================
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List
from cli.cli_dijkstra import cli_dijkstra
from cli.cli_points import cli_points
from cli.cli_stats import cli_stats
from constantes.constantes import DEFAULT_METHOD, DISTANCE_UNIT, SOLVER_METHODS
from funcoes_utilitarias.load_segment_records import SegmentSourceError


# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rota_minima",
        description="Menor caminho entre dois pontos a partir de um arquivo de trechos (CSV/JSON).",
    )
    parser.add_argument("--log-level", dest="log_level", default="WARNING", help="Nível de log (ex.: INFO, DEBUG)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Imprime |V| e |E| do grafo")
    stats.add_argument("segments", help="Caminho do arquivo de trechos")

    points = subparsers.add_parser("points", help="Lista os pontos distintos")
    points.add_argument("segments", help="Caminho do arquivo de trechos")

    route = subparsers.add_parser("dijkstra", help="Menor caminho entre dois pontos")
    route.add_argument("segments", help="Caminho do arquivo de trechos")
    route.add_argument("start", help="Ponto de origem")
    route.add_argument("end", help="Ponto de destino")
    route.add_argument("--method", choices=SOLVER_METHODS, default=DEFAULT_METHOD,
                       help="Seleção do próximo nó: heap (padrão), linear ou networkx")
    route.add_argument("--unit", default=DISTANCE_UNIT, help="Unidade exibida junto da distância")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    start_time = time.time()
    try:
        if args.command == "stats":
            cli_stats(args.segments)
        elif args.command == "points":
            cli_points(args.segments)
        else:
            cli_dijkstra(args.segments, args.start, args.end, method=args.method, unit=args.unit)
    except SegmentSourceError as exc:
        logging.error("%s", exc)
        return 1
    except Exception as exc:  # noqa: BLE001
        logging.exception("Falha ao calcular rota: %s", exc)
        return 2

    execution_time = time.time() - start_time
    print("Tempo de execução total: %s segundos." % execution_time)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
