"""
MATRIXtools command line interface

Print the properties of a matrix given directly, built from a preset or
described in words.

    matrixtools --matrix 2 0 0 0.5
    matrixtools --preset shear --on 0 -1 1 0 --shape F
    matrixtools --text "rotate 45"
    matrixtools --text "turn it upside down" --ai
    matrixtools --matrix3 1 2 3 2 1 4 3 4 1 --decompose

"""

import argparse
import logging
import sys
from termcolor import colored
from .analysis_functions import (
    format_matrix,
    format_report,
    matrix_properties_2x2,
    matrix_properties_3x3)
from .exceptions import MatrixToolsError
from .funcs.classify.operations import ClassifyOperations
from .funcs.natural_language import AIConfig, NaturalLanguageOperations
from .funcs.shapes import SHAPE_NAMES, ShapeOperations
from .funcs.transforms import PRESET_NAMES, TransformOperations

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="matrixtools",
        description="Explore a linear transformation: determinant, trace, eigen-analysis, classification.")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument('--matrix', nargs=4, type=float, metavar=('A', 'B', 'C', 'D'),
                        help='2x2 matrix [[A, B], [C, D]]')
    source.add_argument('--matrix3', nargs=9, type=float, metavar='M',
                        help='3x3 matrix, row-major')
    source.add_argument('--preset', choices=PRESET_NAMES,
                        help='named 2x2 preset')
    source.add_argument('--text', type=str,
                        help='natural-language description, e.g. "rotate 45" or "旋转45"')
    ap.add_argument('--on', nargs=4, type=float, metavar=('A', 'B', 'C', 'D'),
                    help='current matrix the preset is applied to (preset . current)')
    ap.add_argument('--ai', action='store_true',
                    help='fall back to the remote text-completion service (needs OPENAI_API_KEY)')
    ap.add_argument('--shape', choices=SHAPE_NAMES,
                    help='also print the reference shape before and after the map')
    ap.add_argument('--decompose', action='store_true',
                    help='run the simplified diagonalisation and congruence transform (3x3)')
    ap.add_argument('--no-numba', dest='use_numba', action='store_false',
                    help='use the NumPy implementations')
    ap.add_argument('-v', '--verbose', action='store_true',
                    help='debug logging')
    return ap


def check_args(ap: argparse.ArgumentParser,
               args: argparse.Namespace) -> None:
    """Reject option combinations that would be silently ignored"""
    if args.on is not None and args.preset is None:
        ap.error("--on needs --preset")
    if args.ai and args.text is None:
        ap.error("--ai needs --text")
    if args.shape is not None and args.matrix3 is not None:
        ap.error("--shape applies to 2x2 maps only, not --matrix3")
    if args.decompose and args.matrix3 is None:
        ap.error("--decompose needs --matrix3")


def resolve_matrix(args: argparse.Namespace):
    """The 2x2 or 3x3 matrix selected on the command line, or None"""
    transform_ops = TransformOperations(use_numba=args.use_numba)
    if args.matrix is not None:
        return [args.matrix[0:2], args.matrix[2:4]]
    if args.matrix3 is not None:
        return [args.matrix3[0:3], args.matrix3[3:6], args.matrix3[6:9]]
    if args.preset is not None:
        if args.on is None:
            return transform_ops.preset(args.preset)
        return transform_ops.apply_preset(args.preset, [args.on[0:2], args.on[2:4]])

    nl_ops = NaturalLanguageOperations(use_numba=args.use_numba)
    matrix = nl_ops.mock_parse(args.text)
    if matrix is None and args.ai:
        logger.info("no keyword rule matched, asking the text-completion service")
        matrix = nl_ops.parse(args.text, AIConfig.from_env())
    return matrix


def heading(text: str) -> str:
    return colored(text, 'cyan', attrs=['bold'])


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    check_args(ap, args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        matrix = resolve_matrix(args)
    except MatrixToolsError as error:
        print(colored(f"error: {error}", 'red'), file=sys.stderr)
        return 1

    if matrix is None:
        print(colored("Could not recognise the description. "
                      "Try: rotate 45, reflect x, scale 2, shear 1.5, squeeze", 'yellow'),
              file=sys.stderr)
        return 2

    if len(matrix) == 3:
        properties = matrix_properties_3x3(matrix, use_numba=args.use_numba)
        print(heading("3x3 matrix"))
        print(format_report(properties))
        if args.decompose:
            classify_ops = ClassifyOperations(num_of_dims=3, use_numba=args.use_numba)
            for label, names, result in (
                    ("diagonalize", ("D", "P"), classify_ops.diagonalize(properties["matrix"])),
                    ("congruence", ("C^T A C", "C"),
                     classify_ops.congruence_transform(properties["matrix"]))):
                print(heading(label))
                print(result.message)
                if result.success:
                    print(f"{names[0]}:")
                    print(format_matrix(result.result))
                    print(f"{names[1]}:")
                    print(format_matrix(result.transform))
        return 0

    properties = matrix_properties_2x2(matrix, use_numba=args.use_numba)
    print(heading("2x2 matrix"))
    print(format_report(properties))
    if args.shape is not None:
        original, transformed = ShapeOperations(
            use_numba=args.use_numba).transformed_shape(properties["matrix"], args.shape)
        print(heading(f"{args.shape}: original -> transformed"))
        for p, q in zip(original, transformed):
            print(f"({p[0]: .4f}, {p[1]: .4f}) -> ({q[0]: .4f}, {q[1]: .4f})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
