"""
Block DCT Filter
8x8 frequency-domain coefficient filtering for grayscale images
"""

import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = """\
Usage: python main.py <policy> <src> <dst> [T] [--workers N]
       python main.py <policy> --synthetic <dst> [T] [--workers N]

Policies:
  none       keep every coefficient
  zonal      keep coefficients with row + col < 8
  threshold  zero |c| < T            (T in 0-255, default 128)
  fraction   zero the smallest T%    (T in 0-100, default 50)
  zigzag     zero the zigzag tail T% (T in 0-100, default 50)"""


def _pop_workers(args):
    """Strip '--workers N' from args, return (args, workers)."""
    if '--workers' not in args:
        return args, 1
    idx = args.index('--workers')
    if idx + 1 >= len(args):
        raise ValueError("--workers needs a value")
    workers = int(args[idx + 1])
    return args[:idx] + args[idx + 2:], workers


def run_cli(argv=None) -> int:
    """Run the filter from the command line and print the distortion report."""
    from models.filter_params import FilterParams
    from engines.pipeline import filter_image, filter_file
    from utils.errors import FilterError
    from utils.image_io import save_grayscale
    from utils.test_images import generate_textured_quadrants

    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) < 3 or args[0] in ('--help', '-h'):
        print(USAGE)
        return 0

    try:
        args, workers = _pop_workers(args)
        policy_name, src, dst = args[:3]
        parameter = int(args[3]) if len(args) > 3 else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        params = FilterParams.from_name(policy_name, parameter, workers)
        print(f"Policy: {params.policy.value}" +
              (f" (T={params.parameter})" if params.parameter is not None else ""))

        if src == '--synthetic':
            print("Generating test image...")
            result = filter_image(generate_textured_quadrants(256), params)
            save_grayscale(result.reconstructed_image, dst)
        else:
            print(f"Loading: {src}")
            result = filter_file(src, dst, params)

        image = result.original_image
        print(f"Image: {image.shape[1]}x{image.shape[0]}")
    except FilterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n=== Results ===")
    print(result.distortion.format())
    print(f"Zeroed:    {result.zeroed_coeffs}/{result.total_coeffs} "
          f"({result.zeroed_ratio * 100:.1f}%)")
    print(f"Time:      {result.filter_time_ms:.2f} ms")
    print(f"\nSaved: {dst}")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
