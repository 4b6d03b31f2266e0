from greedy_tsp.eval.metrics import compare_heuristics, gap_pct, length_summary

__all__ = ["compare_heuristics", "gap_pct", "length_summary"]
