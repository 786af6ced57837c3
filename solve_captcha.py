import argparse
import json
import logging
import sys

from slider_gap import (
    DEFAULT_THRESHOLD,
    DEFAULT_TRAIT,
    DebugRenderError,
    GeometryTrait,
    decode_base64_image,
    encode_png_base64,
    solve,
)


def find_gap_position(bg_base64, threshold=DEFAULT_THRESHOLD, trait=DEFAULT_TRAIT, debug=False):
    # Decode the Base64 background into an RGBA buffer
    buffer = decode_base64_image(bg_base64)

    # Binarize, index vertical runs and match the piece edges
    return solve(buffer, trait=trait, threshold=threshold, debug=debug)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Read a slider captcha as JSON on stdin and print the gap offset"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the diagnostics written to stderr",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        # Read data from stdin
        input_data = sys.stdin.read()
        data = json.loads(input_data)

        bg_base64_arg = data['background']
        threshold = data.get('threshold', DEFAULT_THRESHOLD)
        trait = GeometryTrait.from_dict(data.get('trait') or {})
        debug = bool(data.get('debug', False))

        result = find_gap_position(bg_base64_arg, threshold=threshold, trait=trait, debug=debug)
        if debug:
            debug_image = None
            debug_error = result.debug_error
            if result.debug_image is not None:
                # A broken overlay must not hide the offset
                try:
                    debug_image = encode_png_base64(result.debug_image)
                except DebugRenderError as e:
                    logging.getLogger(__name__).warning("Debug overlay encoding failed: %s", e)
                    debug_error = str(e)
            print(json.dumps({
                "left": result.left_offset,
                "debug_image": debug_image,
                "debug_error": debug_error,
            }))
        else:
            print(result.left_offset)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
