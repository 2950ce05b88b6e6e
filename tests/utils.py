import importlib
import sys
from pathlib import Path


def setup():
    moduleRoot = Path(__file__).parent.parent

    if str(moduleRoot) not in sys.path:
        sys.path.insert(0, str(moduleRoot))

    return importlib.import_module("json_schema_types")
