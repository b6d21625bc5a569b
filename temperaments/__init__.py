from temperaments.ratios import IntervalRatio, DEFAULT_CATALOGUE, UNISON
from temperaments.scale import ScaleStep, AnnotatedStep, Scale
from temperaments.placement import place_ratios
from temperaments.generators import (
    ScaleFamily, EdoParams, CarlosParams, OrwellParams, PartchParams, generate, build_scale,
)

__version__ = "0.1.0"
