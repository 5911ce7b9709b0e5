#!/usr/bin/env python3
"""
otp_cli.py — CLI wrapper for otp_core.py

Generate a one-time password in accordance with RFC 6238 using HMAC-SHA-512.

Usage examples:
  totp mysecret
  totp mysecret --digits 6 --resolution 60
  totp mysecret -t 1000000000 -v
  totp mysecret --watch
"""

import argparse
import sys
import time

from totp_core import __version__
from totp_core import otp_core


def log(msg: str, verbose: bool):
    if verbose:
        print(f"[+] {msg}")


def unsigned_int(text: str) -> int:
    """argparse type: non-negative integer."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


# --- CLI command handlers ---
def cmd_generate(args) -> int:
    now = int(time.time())
    log(f"Starting execution at {now} seconds with key '{args.key}'.", args.verbose)
    code = otp_core.generate(now, args.offset, args.resolution, args.key, args.digits)
    print(code)
    return 0


def cmd_watch(args) -> int:
    otp_core.check_digits(args.digits)
    otp_core.check_resolution(args.resolution)
    print(f"Press Ctrl+C to quit. Generating {args.digits}-digit TOTP every {args.resolution}s...\n")
    last_code = None
    try:
        while True:
            now = int(time.time())
            code, remaining = otp_core.totp(
                args.key, now, args.resolution, args.offset, args.digits
            )
            if code != last_code:
                log(f"time={now}, counter={otp_core.time_counter(now, args.offset, args.resolution)}",
                    args.verbose)
                print(f"TOTP ({args.digits}d): {code}  (valid ~{remaining:2d}s)")
                last_code = code
            else:
                # Update remaining seconds inline
                print(f".. {remaining:2d}s left", end='\r', flush=True)
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nBye.")
    return 0


# --- Argparse builder ---
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="totp",
        description="Generate a one-time-use password in accordance with RFC 6238 using HMAC-SHA-512.",
    )
    p.add_argument("key", metavar="KEY", help="Key for the one-time password.")
    p.add_argument("-x", "--resolution", metavar="X0", type=unsigned_int,
                   default=otp_core.DEFAULT_TIME_STEP,
                   help="Resolution of the time-based password in seconds.")
    p.add_argument("-t", "--offset", metavar="T0", type=unsigned_int,
                   default=otp_core.DEFAULT_T0, help="Offset from the UNIX epoch.")
    p.add_argument("-d", "--digits", type=unsigned_int,
                   default=otp_core.DEFAULT_DIGITS, help="Digits to output.")
    p.add_argument("-v", "--verbose", action="store_true", help="More verbose output")
    p.add_argument("--watch", action="store_true",
                   help="Keep running and print a new code every time step")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.set_defaults(func=cmd_generate)
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.watch:
        args.func = cmd_watch
    try:
        return args.func(args)
    except otp_core.OTPError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
