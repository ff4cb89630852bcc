from unblock.engine.solver.solver import FrontierEntry, SearchStats, Solver, solve

__all__ = ["FrontierEntry", "SearchStats", "Solver", "solve"]
