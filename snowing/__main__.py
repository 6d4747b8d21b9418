import argparse
import logging
import sys

from snowing import config
from snowing.field import CullMode


def build_parser():
    parser = argparse.ArgumentParser(prog="snowing", description="Let it snow on the desktop.")
    parser.add_argument('--theme', choices=sorted(config.THEMES), default=config.DEFAULT_THEME,
                        help=f'outline colour of the flakes (default: {config.DEFAULT_THEME})')
    parser.add_argument('--cull', choices=[m.value for m in CullMode], default=CullMode.VELOCITY.value,
                        help='compare vertical velocity (original behaviour) or position '
                             'against the screen height to remove flakes (default: velocity)')
    parser.add_argument('--interval', type=int, default=config.TICK_INTERVAL_MS,
                        help=f'tick interval in milliseconds (default: {config.TICK_INTERVAL_MS})')
    parser.add_argument('--seed', type=int, default=None, help='random seed')
    parser.add_argument('--no-tray', action='store_true', help='do not show a tray icon')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval <= 0:
        parser.error("--interval must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Tk와 pystray는 실행할 때만 불러온다
    from snowing.app import Snowfall

    app = Snowfall(theme=args.theme, cull_mode=CullMode(args.cull), interval=args.interval,
                   seed=args.seed, tray=not args.no_tray)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
