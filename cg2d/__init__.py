"""
cg2d — мінімальна бібліотека 2D-опуклих оболонок (Py 3.10+).
Зараз: монотонний ланцюг Ендрю та gift wrapping (Jarvis) з покроковим потоком для анімації.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, DECIMALS, InvalidPointError, unique_points
from cg2d.predicates import Orientation, orient, signed_area2
from cg2d.progress import Step, StepKind, ProgressSink, HullWorker, drive
from cg2d.hull import ConvexHullAlgorithm, validate_hull
from cg2d.andrew import AndrewMonotoneChain
from cg2d.jarvis import JarvisGiftWrapping
from cg2d.pipeline import ALGORITHMS, get_algorithm, convex_hull, hull_steps, reference_hull

__all__ = [
    "Pt", "EPS", "DECIMALS", "InvalidPointError", "unique_points",
    "Orientation", "orient", "signed_area2",
    "Step", "StepKind", "ProgressSink", "HullWorker", "drive",
    "ConvexHullAlgorithm", "validate_hull",
    "AndrewMonotoneChain", "JarvisGiftWrapping",
    "ALGORITHMS", "get_algorithm", "convex_hull", "hull_steps", "reference_hull",
    "__version__",
]
