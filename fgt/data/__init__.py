from .synthetic import GaussProblem, make_problem

__all__ = ["GaussProblem", "make_problem"]
