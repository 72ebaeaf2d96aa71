import math
import pytest
from classes_de_elementos.path_result import PathResult
from classes_de_elementos.segment_record import SegmentRecord
from cli.cli_dijkstra import cli_dijkstra
from funcoes_utilitarias.distinct_points import distinct_points
from funcoes_utilitarias.format_path_result import format_path_result
from rota_minima import main


def test_distinct_points_include_rejected_records():
    records = [
        {"start": "b", "end": "A", "distance": 1},
        {"start": "C", "end": "A", "distance": 1, "status": "closed"},
        {"start": "", "end": None, "distance": 1},
        SegmentRecord("D", "b", None),
    ]
    assert distinct_points(records) == ["A", "C", "D", "b"]


def test_format_found_route():
    message = format_path_result(PathResult(["A", "B", "C"], 8.0), "A", "C")
    assert message == "Menor caminho: A → B → C (Distância: 8 km)"


def test_format_fractional_distance_and_unit():
    message = format_path_result(PathResult(["A", "B"], 2.5), "A", "B", unit="mi")
    assert message.endswith("(Distância: 2.5 mi)")


def test_format_no_route():
    message = format_path_result(PathResult([], math.inf), "A", "Z")
    assert message == "Nenhum caminho disponível entre A e Z!"


def test_cli_dijkstra_route(segments_csv, capsys):
    cli_dijkstra(str(segments_csv), "A", "C")
    assert capsys.readouterr().out.strip() == "Menor caminho: A → B → C (Distância: 8 km)"


def test_cli_dijkstra_guards(segments_csv, capsys):
    cli_dijkstra(str(segments_csv), "A", "A")
    assert "iguais" in capsys.readouterr().out

    cli_dijkstra(str(segments_csv), "A", "")
    assert "Selecione os dois pontos" in capsys.readouterr().out

    # D só aparece em trecho fechado
    cli_dijkstra(str(segments_csv), "A", "D")
    assert "não estão conectados" in capsys.readouterr().out

    cli_dijkstra(str(segments_csv), "A", "X")
    assert "Nenhum caminho disponível entre A e X!" in capsys.readouterr().out


def test_cli_dijkstra_without_records(write_json, capsys):
    cli_dijkstra(str(write_json([])), "A", "B")
    assert "Nenhum trecho carregado" in capsys.readouterr().out


def test_main_commands(segments_csv, capsys):
    assert main(["stats", str(segments_csv)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "RoadGraph |V|=5 |E|=8"
    assert lines[-1].startswith("Tempo de execução total:")

    assert main(["points", str(segments_csv)]) == 0
    assert capsys.readouterr().out.splitlines()[:-1] == ["A", "B", "C", "D", "E", "F", "G", "X", "Y"]

    assert main(["dijkstra", str(segments_csv), "C", "A", "--method", "linear"]) == 0
    assert "C → B → A" in capsys.readouterr().out


def test_main_reports_execution_time_even_with_quiet_logging(segments_csv, capsys):
    assert main(["--log-level", "ERROR", "stats", str(segments_csv)]) == 0
    assert "Tempo de execução total:" in capsys.readouterr().out


@pytest.mark.parametrize("name", ["trechos.csv", "trechos.json"])
def test_main_undecodable_file(tmp_path, capsys, name):
    path = tmp_path / name
    path.write_bytes(b"\xff\xfe")
    assert main(["points", str(path)]) == 1
    assert "Tempo de execução" not in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main(["stats", str(tmp_path / "nada.csv")]) == 1
