"""
CLI to benchmark queue kinds and point-to-point modes over a set of graphs.

Reads a YAML config (see benchmarks/benchmarks.yml), draws seeded random
source/target pairs per graph, times every (queue kind, mode) combination on
the same pairs, and writes one CSV row per query. Rows already present in the
output CSV are skipped so interrupted runs can resume.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple
import argparse
import csv
import random
import time

from .api import PointToPointMode, point_to_point_engine
from .dimacs import load_graph
from .errors import INFINITY
from .generators import grid_graph, random_graph
from .graph import Graph
from .queues import QueueKind

RUN_FIELDS = [
    "graph",
    "queue_kind",
    "mode",
    "source",
    "target",
    "distance",
    "duration_sec",
]


@dataclass(frozen=True)
class GraphConfig:
    name: str
    gr: Optional[str] = None
    co: Optional[str] = None
    grid: Optional[Tuple[int, int]] = None
    random: Optional[Tuple[int, int]] = None


@dataclass(frozen=True)
class BenchConfig:
    seed: int
    queries: int
    queue_kinds: Sequence[QueueKind]
    modes: Sequence[PointToPointMode]
    graphs: Sequence[GraphConfig]


def load_config(path: Path) -> BenchConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text())
    base = Path(path).parent
    graphs = []
    for g in data["graphs"]:
        graphs.append(
            GraphConfig(
                name=g["name"],
                gr=str(base / g["gr"]) if "gr" in g else None,
                co=str(base / g["co"]) if "co" in g else None,
                grid=tuple(g["grid"]) if "grid" in g else None,
                random=tuple(g["random"]) if "random" in g else None,
            )
        )
    return BenchConfig(
        seed=int(data["seed"]),
        queries=int(data["queries"]),
        queue_kinds=[QueueKind(k) for k in data["queue_kinds"]],
        modes=[PointToPointMode(m) for m in data["modes"]],
        graphs=graphs,
    )


def build_graph(cfg: GraphConfig, seed: int) -> Graph:
    if cfg.gr is not None:
        return load_graph(cfg.gr, cfg.co)
    if cfg.grid is not None:
        rows, cols = cfg.grid
        return grid_graph(rows, cols, seed=seed)
    if cfg.random is not None:
        nodes, edges = cfg.random
        return random_graph(nodes, edges, seed=seed)
    raise ValueError(f"Graph '{cfg.name}' needs one of 'gr', 'grid' or 'random'.")


def run_benchmarks(config_path: Path, runs_csv: Path | None = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    existing = load_runs_csv(runs_csv) if runs_csv else []
    seen: Set[Tuple[str, str, str, int, int]] = {
        (str(r["graph"]), str(r["queue_kind"]), str(r["mode"]), int(r["source"]), int(r["target"]))
        for r in existing
    }

    new_rows: List[Dict[str, object]] = []
    for graph_cfg in cfg.graphs:
        graph = build_graph(graph_cfg, cfg.seed)
        if graph.node_count == 0:
            print(f"[bench] skipping empty graph={graph_cfg.name}")
            continue
        rng = random.Random(cfg.seed)
        pairs = [
            (rng.randrange(graph.node_count), rng.randrange(graph.node_count))
            for _ in range(cfg.queries)
        ]
        print(f"[bench] graph={graph_cfg.name} nodes={graph.node_count} queries={len(pairs)}")

        for kind in cfg.queue_kinds:
            for mode in cfg.modes:
                engine = point_to_point_engine(kind, mode)
                for source, target in pairs:
                    key = (graph_cfg.name, kind.value, mode.value, source, target)
                    if key in seen:
                        continue
                    t0 = time.perf_counter()
                    distance = engine.distance(graph, source, target)
                    row = {
                        "graph": graph_cfg.name,
                        "queue_kind": kind.value,
                        "mode": mode.value,
                        "source": source,
                        "target": target,
                        "distance": "inf" if distance == INFINITY else int(distance),
                        "duration_sec": time.perf_counter() - t0,
                    }
                    new_rows.append(row)
                    if runs_csv:
                        append_run_row(runs_csv, row)
                print(f"[bench] completed graph={graph_cfg.name} queue={kind.value} mode={mode.value}")

    results = existing + new_rows
    for query, distances in disagreements(results).items():
        print(f"[bench] disagreement on {query}: {sorted(distances)}")

    elapsed = time.time() - start
    print(f"[bench] completed {len(new_rows)} new queries ({len(results)} total) in {elapsed:.2f}s")
    return results


def disagreements(rows: Iterable[Dict[str, object]]) -> Dict[Tuple[str, int, int], Set[str]]:
    """Queries whose distance differs between queue kinds or modes."""
    by_query: Dict[Tuple[str, int, int], Set[str]] = {}
    for row in rows:
        key = (str(row["graph"]), int(row["source"]), int(row["target"]))
        by_query.setdefault(key, set()).add(str(row["distance"]))
    return {k: v for k, v in by_query.items() if len(v) > 1}


def summarize(rows: Iterable[Dict[str, object]]) -> List[Dict[str, object]]:
    """Mean query time per (graph, queue kind, mode)."""
    totals: Dict[Tuple[str, str, str], List[float]] = {}
    for row in rows:
        key = (str(row["graph"]), str(row["queue_kind"]), str(row["mode"]))
        totals.setdefault(key, []).append(float(row["duration_sec"]))
    return [
        {
            "graph": graph,
            "queue_kind": kind,
            "mode": mode,
            "queries": len(durations),
            "mean_sec": sum(durations) / len(durations),
        }
        for (graph, kind, mode), durations in sorted(totals.items())
    ]


def load_runs_csv(path: Path | None) -> List[Dict[str, object]]:
    if path is None or not path.exists():
        return []
    with path.open() as f:
        rows: List[Dict[str, object]] = []
        for row in csv.DictReader(f):
            row["source"] = int(row["source"])
            row["target"] = int(row["target"])
            row["duration_sec"] = float(row["duration_sec"])
            rows.append(row)
        return rows


def append_run_row(path: Path, row: Dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not path.exists()
    with path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RUN_FIELDS)
        if write_header:
            writer.writeheader()
        writer.writerow(row)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark shortest-path queue kinds and modes.")
    parser.add_argument("--config", type=Path, default=Path("benchmarks") / "benchmarks.yml")
    parser.add_argument("--out", type=Path, default=Path("benchmarks") / "results" / "runs.csv")
    args = parser.parse_args(argv)

    results = run_benchmarks(args.config, runs_csv=args.out)
    for row in summarize(results):
        print(
            f"[bench] {row['graph']:>10} {row['queue_kind']:>12} {row['mode']:>14} "
            f"n={row['queries']} mean={row['mean_sec'] * 1000:.3f}ms"
        )
    print(f"Wrote runs to {args.out}")


if __name__ == "__main__":
    main()
