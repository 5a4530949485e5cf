"""Entry point — opens the trip date picker window."""

import argparse
import ctypes
import logging

from calendar_window import DateRangeWindow


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pick a trip date range.")
    parser.add_argument("--start", default="", help="pre-filled start date (YYYY-MM-DD)")
    parser.add_argument("--end", default="", help="pre-filled end date (YYYY-MM-DD)")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # DPI awareness so fonts are crisp on Hi-DPI monitors (Windows only)
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    window = DateRangeWindow(args.start, args.end)
    window.run()
    print(" ".join(window.result).strip())


if __name__ == "__main__":
    main()
