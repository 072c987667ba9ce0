"""All-pairs shortest paths: repeated Dijkstra fan-out and dense matrix relaxation.

Both engines return an ``n x n`` float64 :mod:`numpy` matrix with ``inf`` for
unreachable pairs, so their outputs can be compared with
:func:`numpy.array_equal`.
"""
from __future__ import annotations

from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor, wait
from typing import Dict, List, Optional, Tuple, Union
import logging

import numpy as np

from .algorithms import AllPairsEngine
from .dijkstra_engine import QueueDijkstraEngine, SearchBudget
from .graph import Graph
from .queues import QueueKind, resolve_queue_kind

logger = logging.getLogger(__name__)


def _solve_block(
    graph: Graph,
    queue_kind: QueueKind,
    budget: Optional[SearchBudget],
    start: int,
    stop: int,
) -> np.ndarray:
    """Distance rows for sources ``start..stop-1``; each source gets its own queue."""
    engine = QueueDijkstraEngine(queue_kind, budget)
    block = np.empty((stop - start, graph.node_count), dtype=np.float64)
    for offset, source in enumerate(range(start, stop)):
        block[offset, :] = engine.shortest_path_costs(graph, source)
    return block


def _write_block(
    matrix: np.ndarray,
    graph: Graph,
    queue_kind: QueueKind,
    budget: Optional[SearchBudget],
    start: int,
    stop: int,
) -> None:
    # Row ranges never overlap, so concurrent writers need no lock.
    matrix[start:stop, :] = _solve_block(graph, queue_kind, budget, start, stop)


class RepeatedDijkstraEngine(AllPairsEngine):
    """
    All-pairs distances from one single-source search per node.

    The searches are independent, so sources are split into contiguous blocks
    of ``chunk_size`` rows and dispatched to a worker pool. Thread workers
    write their block straight into the shared matrix; process workers return
    the block and the caller copies it into place.

    Parameters
    ----------
    queue_kind:
        Priority queue each single-source search runs on.
    max_workers:
        Pool size when the engine creates its own executor.
    executor:
        Optional external executor. When provided, ``max_workers`` and
        ``use_processes`` are ignored and the caller owns its lifetime.
    use_processes:
        Use a ProcessPoolExecutor instead of threads. Falls back to threads
        when process pools are unavailable on the platform.
    """

    def __init__(
        self,
        queue_kind: Union[QueueKind, str] = QueueKind.HEAP4,
        max_workers: Optional[int] = None,
        executor: Optional[Executor] = None,
        use_processes: bool = False,
        chunk_size: int = 64,
        budget: Optional[SearchBudget] = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.queue_kind = resolve_queue_kind(queue_kind)
        self.max_workers = max_workers
        self.executor = executor
        self.use_processes = use_processes
        self.chunk_size = chunk_size
        self.budget = budget

    def distance_matrix(self, graph: Graph) -> np.ndarray:
        n = graph.node_count
        matrix = np.full((n, n), np.inf, dtype=np.float64)
        if n == 0:
            return matrix

        if self.executor is not None:
            self._fan_out(graph, matrix, self.executor)
            return matrix

        if self.use_processes:
            try:
                with ProcessPoolExecutor(max_workers=self.max_workers) as pool:
                    self._fan_out(graph, matrix, pool)
                return matrix
            except (PermissionError, NotImplementedError, OSError) as exc:
                logger.warning("process pool unavailable (%s), falling back to threads", exc)

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            self._fan_out(graph, matrix, pool)
        return matrix

    def _blocks(self, n: int) -> List[Tuple[int, int]]:
        return [(start, min(start + self.chunk_size, n)) for start in range(0, n, self.chunk_size)]

    def _fan_out(self, graph: Graph, matrix: np.ndarray, executor: Executor) -> None:
        in_process = isinstance(executor, ProcessPoolExecutor)
        futures: Dict[Future, Tuple[int, int]] = {}
        for start, stop in self._blocks(graph.node_count):
            if in_process:
                future = executor.submit(_solve_block, graph, self.queue_kind, self.budget, start, stop)
            else:
                future = executor.submit(_write_block, matrix, graph, self.queue_kind, self.budget, start, stop)
            futures[future] = (start, stop)

        done, _pending = wait(futures.keys())
        for future in done:
            start, stop = futures[future]
            block = future.result()
            if in_process:
                matrix[start:stop, :] = block
            logger.debug("all-pairs rows %d..%d done", start, stop - 1)


class MatrixRelaxationEngine(AllPairsEngine):
    """
    Floyd–Warshall over a dense distance matrix.

    After processing intermediate ``k`` entry ``[i, j]`` is the shortest cost
    using only intermediates ``0..k``. O(V^3) time and O(V^2) memory: meant
    for small or dense graphs and as a cross-check of RepeatedDijkstraEngine.
    """

    def distance_matrix(self, graph: Graph) -> np.ndarray:
        n = graph.node_count
        dist = np.full((n, n), np.inf, dtype=np.float64)
        edges = [(e.source, e.target, e.weight) for e in graph.edges()]
        if edges:
            src, dst, weight = (np.asarray(col) for col in zip(*edges))
            # Parallel edges keep the smallest weight.
            np.minimum.at(dist, (src, dst), weight.astype(np.float64))
        np.fill_diagonal(dist, 0.0)

        for k in range(n):
            np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)
        return dist
