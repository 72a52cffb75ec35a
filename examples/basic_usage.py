#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from context_logger import Logger, scope


async def load_user(user_id):
    # No logger parameter: the request logger is found through the context
    Logger.current().info("loading user", {"userId": user_id})
    await asyncio.sleep(0)


async def handle_request(request_id):
    request_logger = Logger.from_options(
        context={"requestId": request_id},
        namespace="api",
        log_level="debug",
    )
    with scope(request_logger):
        await load_user(42)
        request_logger.create_child_logger("db").error("query failed", {"ms": 812})


def main():
    logger = Logger.from_options(
        context={"service": "example"},
        log_level="info",
        log_patterns="api*,-api:health",
        namespace="api",
    )

    logger.debug("hidden below the info threshold")
    logger.info("Application started")
    logger.create_child_logger("health").error("never shown, namespace excluded")

    cyclic = {"name": "node"}
    cyclic["self"] = cyclic
    logger.warn("cycles are safe", {"node": cyclic})

    asyncio.run(handle_request("req-1"))


if __name__ == "__main__":
    main()
