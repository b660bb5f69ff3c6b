from selectorkit.expression.errors import ExpressionError
from selectorkit.expression.transformer import build, evaluate

__all__ = ["ExpressionError", "build", "evaluate"]
