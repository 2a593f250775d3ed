import sys
from pathlib import Path

# Allow running the suite from a plain checkout (no `pip install -e .`).
_BACKEND = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND) not in sys.path:
    sys.path.insert(0, str(_BACKEND))
