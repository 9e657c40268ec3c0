from ..constants import X, Y, Z, EPSILON

##############################################################################
# Tensor (matrix) constants
##############################################################################

SUPPORTED_DIMS = (2, 3)
