"""Run several search strategies on one graph and line their traces up for comparison."""

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor

import pandas as pd

import constants
from file_reader import load_problem
from strategies import ALGORITHM_INFO, Algorithm, parse_algorithm, run_algorithm

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ['algorithm', 'name', 'found', 'path', 'cost', 'nodes_expanded', 'steps']


def compare_algorithms(graph, start, goal, algorithms=None, workers=None):
    """Run each algorithm on the same (graph, start, goal).

    The graph is only read by the searches, so with `workers` > 1 they run on
    a thread pool; each search still owns its own scratch state and result.

    Returns:
        dict {Algorithm: SearchResult} in the order the algorithms were given.
    """
    algorithms = [parse_algorithm(a) for a in (algorithms or list(Algorithm))]

    if workers and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {a: pool.submit(run_algorithm, a, graph, start, goal) for a in algorithms}
            results = {a: futures[a].result() for a in algorithms}
    else:
        results = {a: run_algorithm(a, graph, start, goal) for a in algorithms}

    for algorithm, result in results.items():
        logger.debug("%s expanded %d nodes, path %s", algorithm.value,
                     result.nodes_expanded, result.final_path or "none")
    return results


def summary_frame(results):
    """Pandas table of the results, cheapest path first and unreachable goals last."""
    rows = []
    for algorithm, result in results.items():
        rows.append({
            'algorithm': algorithm.value,
            'name': ALGORITHM_INFO[algorithm]['name'],
            'found': result.found,
            'path': " -> ".join(result.final_path),
            'cost': result.total_cost if result.found else float('inf'),
            'nodes_expanded': result.nodes_expanded,
            'steps': len(result.steps),
        })
    paths_df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    paths_df = paths_df.sort_values(by=['cost', 'nodes_expanded'], kind='stable').reset_index(drop=True)
    paths_df['cost'] = paths_df['cost'].astype(object)
    paths_df.loc[~paths_df['found'], ['path', 'cost']] = constants.NO_PATH_LABEL
    return paths_df


def synchronized_step(results, index):
    """The step each algorithm shows at a shared playback position.

    Traces have different lengths, so an algorithm that already finished keeps
    showing its last (terminal) step. Algorithms with no steps map to None.
    """
    if index < 0:
        raise IndexError(index)
    frame = {}
    for algorithm, result in results.items():
        if not result.steps:
            frame[algorithm] = None
        else:
            frame[algorithm] = result.steps[min(index, len(result.steps) - 1)]
    return frame


def longest_trace(results):
    return max((len(r.steps) for r in results.values()), default=0)


def main(filename, workers=None, start=None, goal=None):
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

    print(f"Problem File: {filename}")
    print(f"Origin: {start}")
    print(f"Destination: {goal}")
    results = compare_algorithms(graph, start, goal, workers=workers)
    with pd.option_context('display.max_colwidth', None, 'display.width', 200):
        print(summary_frame(results).to_string(index=False))
    return 0


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Compare every search strategy on one problem file")
    parser.add_argument("filename")
    parser.add_argument("--workers", type=int, default=None, help="Run the searches on N threads")
    parser.add_argument("--start")
    parser.add_argument("--goal")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=constants.LOG_FORMAT)
    return main(args.filename, args.workers, args.start, args.goal)


if __name__ == "__main__":
    sys.exit(cli())
