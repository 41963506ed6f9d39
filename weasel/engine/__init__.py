from __future__ import annotations

from weasel.engine.config import BreederConfig
from weasel.engine.core import Breeder
from weasel.engine.metrics import RunMetrics
from weasel.engine.sequence import GenerationSequence
