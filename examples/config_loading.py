"""config_loading.py"""
import logging
import sys
from pathlib import Path

from argvtree.config import loader
from argvtree.utils import setup_logging

deploy = loader(Path(__file__).parent / "grammar.yaml")

if __name__ == "__main__":
    setup_logging(mode="cli", level=logging.INFO)
    result = deploy.run(sys.argv[1:] or ["-e", "staging", "v1.2.3"])
    print(result.to_dict())
