from ._catmull_rom import (
    CatmullRomSpline,
    catmull_rom_fit,
    catmull_rom_spline,
)
from ._catmull_rom_evaluate import (
    catmull_rom_coefficients,
    catmull_rom_evaluate,
)

__all__ = [
    "CatmullRomSpline",
    "catmull_rom_coefficients",
    "catmull_rom_evaluate",
    "catmull_rom_fit",
    "catmull_rom_spline",
]
