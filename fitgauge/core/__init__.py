from .estimator import estimate, estimate_measurements
from .size_guides import SizeGuideIndex, collect_size_guide, load_default_index, select_combo
from .unisex import build_unisex_sizes
from .adjacent import get_adjacent_sizes
from .size_recommendation import identify_size
from .fit_description import describe_fit
