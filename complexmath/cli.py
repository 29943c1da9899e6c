import argparse
from pathlib import Path

from complexmath.config import RenderConfig, load_config
from complexmath.iterators import pick_shader
from complexmath.render import render_grid
from complexmath.utils import parse_complex


def build_parser():
    parser = argparse.ArgumentParser(
        description="Render a complex-valued shader or escape-time map to PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  complexmath-render --config configs/default.yaml --outfile figures/roots.png
  complexmath-render --shader log --param k=1 --outfile figures/log_k1.png
  complexmath-render --map quadratic --c=-0.8+0.156j --color-mode iters --outfile figures/julia.png
""",
    )
    parser.add_argument("--config", type=str, default=None, help="YAML render config")
    parser.add_argument("--shader", type=str, default=None,
                        choices=["identity", "sqrt", "exp", "log", "power", "root", "cpow", "base_pow"])
    parser.add_argument("--map", type=str, default=None,
                        choices=["quadratic", "power", "exp", "log"])
    parser.add_argument("--param", action="append", default=[], metavar="KEY=VALUE",
                        help="shader/map parameter, repeatable (e.g. n=5)")
    parser.add_argument("--c", type=str, default=None)
    parser.add_argument("--xmin", type=float, default=None)
    parser.add_argument("--xmax", type=float, default=None)
    parser.add_argument("--ymin", type=float, default=None)
    parser.add_argument("--ymax", type=float, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--max_iter", type=int, default=None)
    parser.add_argument("--escape", type=float, default=None)
    parser.add_argument("--color-mode", type=str, default=None,
                        choices=["auto", "iters", "continuous"])
    parser.add_argument("--cmap", type=str, default=None)
    parser.add_argument("--outfile", type=str, required=True)
    return parser


def _parse_param(item):
    key, sep, value = item.partition("=")
    if not sep:
        raise ValueError(f"Expected KEY=VALUE, got {item!r}")
    try:
        return key, float(value) if "." in value or "e" in value.lower() else int(value)
    except ValueError:
        return key, value


def apply_overrides(cfg: RenderConfig, args) -> RenderConfig:
    """Command-line flags win over config values."""
    if args.map is not None:
        cfg.map = args.map
        cfg.shader = None
    if args.shader is not None:
        cfg.shader = args.shader
        cfg.map = None
    for item in args.param:
        key, value = _parse_param(item)
        cfg.params[key] = value

    overrides = {
        "c": args.c,
        "xmin": args.xmin,
        "xmax": args.xmax,
        "ymin": args.ymin,
        "ymax": args.ymax,
        "width": args.width,
        "height": args.height,
        "max_iter": args.max_iter,
        "escape_radius": args.escape,
        "color_mode": args.color_mode,
        "cmap": args.cmap,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(cfg, key, value)
    return cfg


def render_config(cfg: RenderConfig):
    """Render a RenderConfig to an (H, W, 3) uint8 array."""
    common = dict(
        xmin=cfg.xmin, xmax=cfg.xmax,
        ymin=cfg.ymin, ymax=cfg.ymax,
        width=cfg.width, height=cfg.height,
        max_iter=cfg.max_iter,
        escape_radius=cfg.escape_radius,
        color_mode=cfg.color_mode,
        cmap=cfg.cmap,
    )
    if cfg.map is not None:
        return render_grid(
            map_name=cfg.map,
            c=parse_complex(cfg.c),
            power=float(cfg.params.get("power", 2.0)),
            **common,
        )
    return render_grid(shader=pick_shader(cfg.shader or "identity", **cfg.params), **common)


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1
        cfg = load_config(config_path)
    else:
        cfg = RenderConfig()

    cfg = apply_overrides(cfg, args)

    out_path = Path(args.outfile)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    what = f"map={cfg.map}, c={cfg.c}" if cfg.map is not None else f"shader={cfg.shader}"
    print(f"[run] {what}, params={cfg.params}, {cfg.width}x{cfg.height}, saving to {out_path}")

    img = render_config(cfg)

    from PIL import Image
    im = Image.fromarray(img)
    im.save(out_path)
    print("[run] done.")
    return 0
