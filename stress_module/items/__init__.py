"""Auto-discover and import all item modules."""
from pathlib import Path
import importlib

# Auto-import all .py files in this directory (except __init__.py), sorted so
# the capability listing has a stable order
for _file in sorted(Path(__file__).parent.glob("*.py")):
    if not _file.stem.startswith("_"):
        importlib.import_module(f".{_file.stem}", __package__)
