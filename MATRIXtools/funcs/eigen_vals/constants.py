from ..constants import X, Y, Z, EPSILON

##############################################################################
# Eigenvalue constants
##############################################################################

REAL, IMAG = 0, 1  # column layout of the (2, 2) eigenvalue kernel output
