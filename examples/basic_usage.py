#!/usr/bin/env python3
"""Basic usage example"""

import sys

import process_logger as log

def main():
    # Banner and counters
    log.init("debug", "example", "1.0.0")

    # Log messages
    log.verbose("This is verbose (hidden at DEBUG)")
    log.debug("This is debug")
    log.info("Application started")
    log.info("User logged in", ip="10.0.0.1", username="alice")
    log.info("Login failed", ip="10.0.0.2")
    log.warn("This is warning")
    log.error("This is error")

    # Report and exit
    log.uninit(0)
    return 0

if __name__ == "__main__":
    sys.exit(main())
