from minilisp.evaluation.evaluator import evaluate, evaluate_all

__all__ = ["evaluate", "evaluate_all"]
