from iota.types.symbol import Symbol
from iota.types.environment import Environment
from iota.types.lambda_fn import Lambda

__all__ = ["Symbol", "Environment", "Lambda"]
