##############################################################################
# Shared constants for all MATRIXtools modules
##############################################################################

X, Y, Z = 0, 1, 2  # indexes

# Single tolerance for symmetry, orthogonality, eigenvector degeneracy,
# diagonal-case selection and normalisation. Keep the predicates consistent
# by never introducing a second epsilon.
EPSILON = 1e-10
