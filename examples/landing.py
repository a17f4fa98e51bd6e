# landing.py

import argparse
from finantic import Interface


def main():
    parser = argparse.ArgumentParser(description='Finantic landing page')
    parser.add_argument('-e', '--endpoint',
        help='Waitlist endpoint URL (default: FINANTIC_WAITLIST_ENDPOINT or the local server)')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args()

    landing = Interface(
        endpoint=args.endpoint,
        logging_enabled=args.enable_logging,
        log_file=args.log_file
    )

    # Enter opens the waitlist form, q quits
    landing.start()

if __name__ == "__main__":
    main()
