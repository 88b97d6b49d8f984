#!/usr/bin/env python3
"""Basic usage example"""

from dlog import Level, Logger, LoggingContextBuilder


def main():
    # Create an isolated context with per-logger levels
    context = (LoggingContextBuilder()
        .with_hierarchy()
        .with_stack_traces_at(Level.ERROR)
        .with_default_level(Level.INFO)
        .build())

    root = Logger.get_root(context)
    db = Logger.get("app.db", context)
    db.level = Level.DEBUG

    # Subscribe listeners
    root_sub = root.subscribe(lambda record: print(f"root  {record}"))
    db_sub = db.subscribe(lambda record: print(f"db    {record}"))

    # Log messages
    db.trace("This is trace")                # filtered out
    db.debug(lambda: "Lazily built debug")   # evaluated, reaches db and root
    Logger.get("app", context).info("Application started")
    db.error("Connection lost", ConnectionError("reset by peer"))
    db.wtf("This should never happen")       # stack trace attached

    # Unsubscribe
    db_sub.cancel()
    root_sub.cancel()


if __name__ == "__main__":
    main()
