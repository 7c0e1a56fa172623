import io

from bfs_demo import main


def test_main_output(capsys):
    assert main.main() == 0
    assert capsys.readouterr().out == "BFS starting from vertex 0: 0 1 2 3 4 5 \n"


def test_run_returns_order():
    buf = io.StringIO()
    assert main.run(buf) == [0, 1, 2, 3, 4, 5]
    assert buf.getvalue() == "BFS starting from vertex 0: 0 1 2 3 4 5 \n"


def test_sample_graph():
    g = main.build_sample_graph()
    assert g.vertex_count == 6
    assert g.edge_count() == len(main.SAMPLE_EDGES)


def test_package_exports():
    import bfs_demo
    from bfs_demo.graph import Graph

    assert bfs_demo.Graph is Graph
    assert bfs_demo.bfs_order(main.build_sample_graph(), 0) == [0, 1, 2, 3, 4, 5]
