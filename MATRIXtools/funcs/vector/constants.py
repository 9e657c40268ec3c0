from ..constants import X, Y, Z, EPSILON

##############################################################################
# Vector constants
##############################################################################

DEFAULT_EPS = EPSILON  # below this length a vector has no direction
