"""Turn short website ideas into structured, bilingual build briefs."""

from .classifier import Classifier
from .engine import Engine, ImproveResult
from .hints import Hints
from .merger import HintMerger
from .models import FeatureVector

__all__ = [
    "Classifier",
    "Engine",
    "FeatureVector",
    "HintMerger",
    "Hints",
    "ImproveResult",
]

__version__ = "0.1.0"
