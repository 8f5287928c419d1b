#!/usr/bin/env python3
"""Basic usage example"""

import sys

from tagged_logger import new, with_level, with_writer, LoggerBuilder, LogLevel


class Service:
    def __init__(self):
        self.log = new("service", with_level(LogLevel.DEBUG))

    def start(self):
        # caller column shows "Service.start"
        self.log.debug("starting with", 4, "workers")
        self.log.infof("listening on %s:%d", "127.0.0.1", 8080)


def main():
    Service().start()

    # No tag: the tag column is left out
    plain = new("", with_writer(sys.stderr))
    plain.warn("disk usage at ", 91, "%")

    # Builder pattern
    worker = (LoggerBuilder()
        .with_tag("worker")
        .with_level(LogLevel.WARN)
        .with_console()
        .with_lock()
        .build())
    worker.info("suppressed")
    worker.error("job failed")

    worker.fatal("giving up")


if __name__ == "__main__":
    main()
