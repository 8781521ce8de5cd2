from enum import Enum, auto

class ChartType(Enum):
    """Enum defining available chart types."""
    CORRELATION = auto()
    DECISION_TREE = auto()
    CONFUSION_MATRIX = auto()
    ACCURACY_COMPARISON = auto()
