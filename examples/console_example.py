"""Example of the two-tier console logger.

Run with:
    python examples/console_example.py

Output:
    DEBUG/INFO/WARN lines are written without a call site.
    ERROR lines carry the call site and render the ``err`` attribute in red.
    Records from the standard library ``logging`` module go through the
    same handlers once the logger is installed as the default.

Environment:
    TIERLOG_LEVEL   - minimum level (default INFO)
    NO_COLOR        - disable colors
"""

import logging

import tierlog


def redact_tokens(groups, attr: tierlog.Attr) -> tierlog.Attr:
    """Hide values of attributes named ``token``."""
    if attr.key == "token":
        return tierlog.Attr(attr.key, "***")
    return attr


def main() -> None:
    options = tierlog.HandlerOptions.from_env()
    options.replace_attr = redact_tokens
    logger = tierlog.init_default(options)

    logger.debug("cache warmed", entries=128)
    logger.info("server started", port=8080, token="s3cr3t")

    request_log = logger.with_attrs(request_id="abc123").with_group("http")
    request_log.warn("slow response", path="/orders", elapsed_ms=812)

    try:
        {}["missing"]
    except KeyError as exc:
        request_log.error("lookup failed", err=exc)

    logging.getLogger("legacy").error("stdlib logging is routed too")
    tierlog.info("module-level logging uses the default logger")


if __name__ == "__main__":
    main()
