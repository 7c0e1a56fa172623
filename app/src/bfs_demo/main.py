import logging
import sys
from typing import List, TextIO

from .bfs import bfs
from .graph import Graph

# Sample graph, inserted in this order
SAMPLE_VERTEX_COUNT = 6
SAMPLE_EDGES = [(0, 1), (0, 2), (1, 3), (2, 4), (3, 4), (3, 5)]
START_VERTEX = 0
LABEL = "BFS starting from vertex {start}: "

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVEL = logging.WARNING

logger = logging.getLogger(__name__)


def build_sample_graph() -> Graph:
    return Graph.from_edges(SAMPLE_VERTEX_COUNT, SAMPLE_EDGES)


def run(out: TextIO) -> List[int]:
    g = build_sample_graph()
    logger.info(f"Running BFS on {g!r} from vertex {START_VERTEX}")
    out.write(LABEL.format(start=START_VERTEX))
    return list(bfs(g, START_VERTEX, out=out))


def main() -> int:
    logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)
    run(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
