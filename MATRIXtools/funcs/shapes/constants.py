##############################################################################
# Reference shapes (unit coordinates)
##############################################################################

SQUARE = (
    (0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)
)

# outline of the letter F, closed
LETTER_F = (
    (0.0, 0.0), (0.0, 2.0), (1.5, 2.0), (1.5, 1.5), (0.5, 1.5),
    (0.5, 1.2), (1.2, 1.2), (1.2, 0.9), (0.5, 0.9),
    (0.5, 0.0), (0.0, 0.0)
)

GRID_START, GRID_STOP, GRID_STEP = 0.0, 2.0, 0.5

DEFAULT_SHAPE = "square"
SHAPE_NAMES = ("square", "F", "grid")

##############################################################################
# View parameters
##############################################################################

GRID_EXTENT = 5          # grid lines at -5..5 units
ARROW_LENGTH = 2.0       # eigenvector arrows are drawn 2 units long
CANVAS_SIZE = 600        # pixels
CANVAS_UNITS = 10        # units mapped onto the canvas width
