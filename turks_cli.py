import argparse
from turks_config import DEFAULT_KNOT, get_render_defaults
from turks_describe import describe_turkshead
from turkshead import InvalidParameters, TurksHead
from turksgen_web import draw_turkshead_web_bytes


def build_argparser():
    defaults = get_render_defaults()
    ap = argparse.ArgumentParser(description="Render a Turk's head knot to PNG (no UI)")
    ap.add_argument("--leads", type=int, default=DEFAULT_KNOT["leads"])
    ap.add_argument("--bights", type=int, default=DEFAULT_KNOT["bights"])
    ap.add_argument("--inner", type=float, default=DEFAULT_KNOT["inner_radius"], help="Inner radius of the annulus")
    ap.add_argument("--outer", type=float, default=DEFAULT_KNOT["outer_radius"], help="Outer radius of the annulus")
    ap.add_argument("--line-width", type=float, default=DEFAULT_KNOT["line_width"])
    ap.add_argument("--out", default="turkshead.png", help="Output PNG file")
    ap.add_argument("--size", type=int, default=defaults["img_size"][0], help="Image side in pixels")
    ap.add_argument("--padding", type=int, default=defaults["padding"])
    ap.add_argument("--bg", default=defaults["background"])
    ap.add_argument("--describe", action="store_true", help="Print a description of the knot before rendering")
    return ap


def main(argv=None):
    args = build_argparser().parse_args(argv)

    try:
        knot = TurksHead(args.leads, args.bights, args.inner, args.outer, args.line_width)
    except InvalidParameters as e:
        raise SystemExit(f"Invalid parameters: {e}")

    if args.describe:
        print(describe_turkshead(knot)["description"])

    data = draw_turkshead_web_bytes(
        args.leads, args.bights, args.inner, args.outer, args.line_width,
        img_size=(args.size, args.size), padding=args.padding, background=args.bg,
    )
    with open(args.out, "wb") as f:
        f.write(data)

    print(f"Saved {args.out}")


if __name__ == "__main__":
    main()
