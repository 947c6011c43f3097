from iota.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
