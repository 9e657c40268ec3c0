import numpy as np
from types import MappingProxyType
from ...matrix_types import freeze

##############################################################################
# Preset transforms (2x2)
##############################################################################

_COS_45 = np.cos(np.pi / 4)
_SIN_45 = np.sin(np.pi / 4)

# Named constants; a preset is composed with the current matrix as
# preset . current, so these must not be recomputed per call.
PRESET_TRANSFORMS = MappingProxyType({
    "identity":  freeze(np.array([[1.0, 0.0], [0.0, 1.0]])),
    "rotate90":  freeze(np.array([[0.0, -1.0], [1.0, 0.0]])),
    "rotate45":  freeze(np.array([[_COS_45, -_SIN_45], [_SIN_45, _COS_45]])),
    "reflect_x": freeze(np.array([[1.0, 0.0], [0.0, -1.0]])),
    "reflect_y": freeze(np.array([[-1.0, 0.0], [0.0, 1.0]])),
    "shear":     freeze(np.array([[1.0, 1.0], [0.0, 1.0]])),
    "squeeze":   freeze(np.array([[2.0, 0.0], [0.0, 0.5]])),
    "scale2":    freeze(np.array([[2.0, 0.0], [0.0, 2.0]])),
})

PRESET_NAMES = tuple(PRESET_TRANSFORMS)
