from ..constants import EPSILON

##############################################################################
# Classification and decomposition constants
##############################################################################

MSG_DIAGONALIZE_NOT_SYMMETRIC = (
    "Matrix is not symmetric; the simplified algorithm cannot diagonalize it")
MSG_DIAGONALIZE_OK = (
    "Diagonalization succeeded (approximate: D holds the sorted diagonal "
    "entries and P is the identity)")
MSG_CONGRUENCE_NOT_SYMMETRIC = (
    "Matrix is not symmetric; congruence transform is not possible")
MSG_CONGRUENCE_OK = (
    "Congruence transform complete (simplified: C is the identity and the "
    "matrix is returned unchanged)")
