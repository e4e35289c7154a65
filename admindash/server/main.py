#!/usr/bin/env python3
"""
admindash server entry point

Loads configuration (YAML file, then environment), builds the FastAPI app and
runs it with uvicorn.
"""

import argparse
import logging

import uvicorn

from .core.config import load_config_from
from .core.server import create_app


def main():
    """Main entry point for the admindash server."""
    parser = argparse.ArgumentParser(description="admindash server")
    parser.add_argument("-c", "--config", help="Path to YAML config", default="config.yaml")
    args = parser.parse_args()

    config = load_config_from(args.config)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = create_app(config)

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        reload=False,
        access_log=False,
    )


if __name__ == "__main__":
    main()
