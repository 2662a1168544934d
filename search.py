import argparse
import logging
import sys
import time
import tracemalloc

import psutil

import constants
from file_reader import load_problem
from strategies import ALGORITHM_INFO, parse_algorithm, run_algorithm
from util import FormatBytes

logger = logging.getLogger(__name__)


def _execute_with_metrics(run_fn, graph, start, goal):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn(graph, start, goal)
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, dt, peak, rss_after


def format_step(index, step):
    """One line per step: index, current node, frontier and visited sizes, message."""
    current = step.current_node if step.current_node is not None else "-"
    frontier = ",".join(sorted(step.frontier))
    line = (f"[{index:>4}] current={current} frontier={{{frontier}}} "
            f"visited={len(step.visited)} | {step.message}")
    if step.best_path:
        line += f" | best={' -> '.join(step.best_path)} ({step.best_cost})"
    return line


def main(filename, method, metrics_mode="none", show_trace=False, start=None, goal=None):
    """Main function to run the search algorithm.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the result

    Returns the process exit code.
    """
    try:
        algorithm = parse_algorithm(method)
    except ValueError as e:
        print(e)
        return 1

    # 1. Read and build the graph
    try:
        graph = load_problem(filename)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {filename}: {e}")
        return 1

    start = start if start is not None else graph.origin
    goal = goal if goal is not None else graph.goal
    if start is None or goal is None:
        print(f"Error: {filename} gives no origin/destination; pass --start and --goal")
        return 1

    print(f"Problem File: {filename}, Method: {ALGORITHM_INFO[algorithm]['name']}")
    print(f"Origin: {start}")
    print(f"Destination: {goal}")

    # 2. Run the selected method with metrics
    result, runtime_s, peak_bytes, rss_after = _execute_with_metrics(
        lambda g, s, t: run_algorithm(algorithm, g, s, t), graph, start, goal)

    if show_trace:
        for i, step in enumerate(result.steps):
            print(format_step(i, step))

    # 3. Output the result
    print(f"{filename} {method.upper()}")
    if result.found:
        print(f"Goal node reached:{goal}")
        print(f"Number of Nodes expanded:{result.nodes_expanded}")
        print(" -> ".join(result.final_path))
        print(f"Total path cost:{result.total_cost}")
    else:
        print(f"None {result.nodes_expanded}")
        terminal = result.terminal_step
        if terminal:
            print(terminal.message)
        else:
            missing = start if not graph.has_node(start) else goal
            print(f"{missing} is not in the graph")

    # Metrics (printed separately so the result block stays intact)
    if metrics_mode in ("stderr", "stdout"):
        metrics_line = (
            f"Metrics: method={algorithm.value} nodes_expanded={result.nodes_expanded} "
            f"steps={len(result.steps)} path_cost={result.total_cost if result.found else 'N/A'} "
            f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)} "
            f"rss_now={FormatBytes(rss_after)}"
        )
        if metrics_mode == "stdout":
            print(metrics_line)
        else:
            print(metrics_line, file=sys.stderr)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Run one search strategy on a problem file")
    parser.add_argument("filename", help="Problem file (plain or [NODES]/[EDGES]/[META] format)")
    parser.add_argument("method", help="BFS, DFS, GBFS, AS or CUS1 (also: greedy, astar, dijkstra)")
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const",
                         const="stderr", default="none", help="Print a metrics line to stderr")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const",
                         const="stdout", help="Print a metrics line to stdout")
    parser.add_argument("--trace", action="store_true", help="Print every step of the trace")
    parser.add_argument("--start", help="Override the origin from the file")
    parser.add_argument("--goal", help="Override the destination from the file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=constants.LOG_FORMAT)
    return main(args.filename, args.method, args.metrics_mode, args.trace, args.start, args.goal)


if __name__ == "__main__":
    sys.exit(cli())
