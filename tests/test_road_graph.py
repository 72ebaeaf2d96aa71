import logging
import networkx as nx
from classes_de_elementos.edge import Edge
from classes_de_elementos.road_graph import RoadGraph
from classes_de_elementos.segment_record import SegmentRecord


def test_build_adds_both_directions(triangle_records):
    graph = RoadGraph.build(triangle_records)

    assert graph.nodes() == ["A", "B", "C"]
    assert graph.neighbors("A") == [Edge("B", 5.0), Edge("C", 10.0)]
    assert graph.neighbors("B") == [Edge("A", 5.0), Edge("C", 3.0)]
    assert graph.neighbors("C") == [Edge("B", 3.0), Edge("A", 10.0)]
    assert graph.edge_count() == 2 * len(triangle_records)


def test_build_symmetry_for_every_accepted_record(triangle_records):
    graph = RoadGraph.build(triangle_records)
    for raw in triangle_records:
        assert Edge(raw["end"], float(raw["distance"])) in graph.neighbors(raw["start"])
        assert Edge(raw["start"], float(raw["distance"])) in graph.neighbors(raw["end"])


def test_build_skips_non_operational_segments():
    graph = RoadGraph.build([
        {"start": "A", "end": "B", "distance": 1, "status": "o"},
        {"start": "B", "end": "C", "distance": 1, "status": "closed"},
        {"start": "C", "end": "D", "distance": 1, "status": "X"},
    ])

    assert "C" not in graph
    assert "D" not in graph
    assert all(edge.to != "C" for edges in graph.adj.values() for edge in edges)
    assert graph.edge_count() == 2


def test_build_skips_malformed_records_without_raising():
    graph = RoadGraph.build([
        {"start": "A", "distance": 1},
        {"start": "A", "end": "B", "distance": "n/a"},
        {"start": "A", "end": "B", "distance": -2},
        {},
    ])
    assert len(graph) == 0
    assert graph.edge_count() == 0


def test_build_keeps_parallel_edges():
    graph = RoadGraph.build([
        SegmentRecord("A", "B", 6.0, "o"),
        SegmentRecord("A", "B", 4.0),
    ])
    assert graph.neighbors("A") == [Edge("B", 6.0), Edge("B", 4.0)]
    assert graph.edge_count() == 4


def test_build_empty_records():
    graph = RoadGraph.build([])
    assert graph.node_count() == 0
    assert graph.neighbors("A") == []


def test_build_logs_rejections(caplog):
    with caplog.at_level(logging.DEBUG, logger="classes_de_elementos.road_graph"):
        RoadGraph.build([{"start": "A", "end": "B", "distance": 1, "status": "c"}])
    assert "status não operacional" in caplog.text
    assert "0 trechos aceitos, 1 descartados" in caplog.text


def test_load_graph_from_csv(segments_csv):
    graph = RoadGraph.load_graph(str(segments_csv))
    # C-D (status c), E-? (sem fim) e F-G (distância inválida) ficam de fora
    assert sorted(graph.nodes()) == ["A", "B", "C", "X", "Y"]
    assert graph.edge_count() == 8


def test_to_networkx_preserves_parallel_edges_and_isolated_nodes():
    graph = RoadGraph.build([
        {"start": "A", "end": "B", "distance": 4},
        {"start": "A", "end": "B", "distance": 6},
    ])
    graph.adj["Z"] = []

    G = graph.to_networkx()
    assert isinstance(G, nx.MultiDiGraph)
    assert G.number_of_edges("A", "B") == 2
    assert sorted(d["d"] for d in G.get_edge_data("A", "B").values()) == [4.0, 6.0]
    assert "Z" in G
