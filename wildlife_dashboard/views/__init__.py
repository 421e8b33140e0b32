from .adults_view import AdultsView
from .nests_view import NestsView
from .totals_view import TotalsView
from .seen_view import SeenView

__all__ = ["AdultsView", "NestsView", "TotalsView", "SeenView"]
