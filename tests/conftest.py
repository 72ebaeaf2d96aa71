import json
import pytest


@pytest.fixture
def triangle_records():
    # A-C direto (10) é mais longo que A-B-C (5 + 3)
    return [
        {"start": "A", "end": "B", "distance": 5, "status": "o"},
        {"start": "B", "end": "C", "distance": 3, "status": "O"},
        {"start": "A", "end": "C", "distance": 10, "status": "o"},
    ]


@pytest.fixture
def segments_csv(tmp_path):
    path = tmp_path / "trechos.csv"
    path.write_text(
        "start,end,distance,status\n"
        "A,B,5,o\n"
        "B,C,3,o\n"
        "A,C,10,o\n"
        "C,D,2,c\n"
        "E,,4,o\n"
        "F,G,abc,\n"
        "X,Y,1,\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def write_json(tmp_path):
    def _write(payload, name="trechos.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write
